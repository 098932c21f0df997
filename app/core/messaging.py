"""Kafka 액션 알림 발행

사용자 생성/삭제 같은 액션을 외부 토픽으로 알리는 fire-and-forget 퍼블리셔입니다.
발행 결과는 호출자가 확인하지 않으며, 브로커 오류는 로그로만 남깁니다.
"""

import asyncio
from functools import lru_cache
from typing import Optional, Protocol

from aiokafka import AIOKafkaProducer
from aiokafka.errors import KafkaError

from app.core.config import Settings, settings
from app.core.logging import get_logger

logger = get_logger(__name__)


class Notifier(Protocol):
    """액션 알림 발행 인터페이스"""

    async def publish(self, topic: str, message: str) -> None: ...


class KafkaNotifier:
    """aiokafka 기반 알림 퍼블리셔

    start()/stop()은 애플리케이션 lifespan에서 호출합니다.
    """

    def __init__(self, settings: Settings):
        """
        Args:
            settings: 애플리케이션 설정
        """
        self.settings = settings
        self._producer: Optional[AIOKafkaProducer] = None

    @property
    def is_running(self) -> bool:
        return self._producer is not None

    async def start(self) -> None:
        """프로듀서 시작

        Raises:
            KafkaError: 브로커에 연결할 수 없는 경우
        """
        if not self.settings.kafka_enabled:
            logger.info("Kafka notifier disabled")
            return
        if self._producer is not None:
            return

        producer = AIOKafkaProducer(
            bootstrap_servers=self.settings.kafka_bootstrap_servers,
            client_id=self.settings.kafka_client_id,
        )
        try:
            await producer.start()
        except KafkaError:
            await producer.stop()
            raise

        self._producer = producer
        logger.info(
            "Kafka notifier started",
            extra={
                "bootstrap_servers": self.settings.kafka_bootstrap_servers,
                "topic": self.settings.kafka_topic,
            },
        )

    async def stop(self) -> None:
        """프로듀서 종료 (대기 중인 메시지 flush 포함)"""
        if self._producer is None:
            return
        producer, self._producer = self._producer, None
        await producer.stop()
        logger.info("Kafka notifier stopped")

    async def publish(self, topic: str, message: str) -> None:
        """메시지 발행 (전송 완료를 기다리지 않음)

        Args:
            topic: 대상 토픽
            message: 평문 메시지 (예: "CREATE user@example.com")
        """
        if self._producer is None:
            logger.warning(
                "Kafka notifier is not running; message skipped",
                extra={"topic": topic, "kafka_message": message},
            )
            return

        try:
            delivery = await self._producer.send(
                topic, value=message.encode("utf-8")
            )
        except KafkaError as e:
            logger.error(
                "Failed to enqueue Kafka message",
                extra={"topic": topic, "kafka_message": message, "error": str(e)},
            )
            return

        delivery.add_done_callback(
            lambda fut: _log_delivery_failure(fut, topic, message)
        )


def _log_delivery_failure(
    fut: asyncio.Future, topic: str, message: str
) -> None:
    if fut.cancelled():
        return
    error = fut.exception()
    if error is not None:
        logger.error(
            "Kafka message delivery failed",
            extra={"topic": topic, "kafka_message": message, "error": str(error)},
        )


async def start_notifier_on_startup(notifier: KafkaNotifier) -> None:
    """서버 시작 시 알림 퍼블리셔 시작

    개발 환경에서는 브로커 연결 실패 시 경고만 남기고 계속 진행합니다.
    """
    try:
        await notifier.start()
    except KafkaError as e:
        logger.error(f"❌ Kafka 연결 실패: {e}")
        if settings.is_production:
            raise RuntimeError("프로덕션 환경에서 Kafka 연결 실패") from e
        logger.warning("⚠️ 개발 환경이므로 알림 없이 서버를 계속 시작합니다.")


@lru_cache
def _create_notifier() -> KafkaNotifier:
    """알림 퍼블리셔 싱글톤 생성 (캐시됨)"""
    return KafkaNotifier(settings)


def get_notifier() -> KafkaNotifier:
    """FastAPI DI용 알림 퍼블리셔 의존성"""
    return _create_notifier()
