"""시간 측정 유틸리티 테스트"""

import time

import pytest

from app.core.utils.time import measure_time


def test_measure_time_context_manager():
    """measure_time 컨텍스트 매니저 테스트"""
    with measure_time() as timer:
        # 초기값은 0
        assert timer["elapsed_ms"] == 0.0
        time.sleep(0.03)

    assert timer["elapsed_ms"] >= 30


def test_measure_time_with_exception():
    """예외 발생 시에도 시간이 측정되는지 테스트"""
    with pytest.raises(ValueError):
        with measure_time() as timer:
            time.sleep(0.02)
            raise ValueError("Test error")

    assert timer["elapsed_ms"] >= 20
