import asyncio

import pytest

from engine import Pacer, DEFAULT_DELAY_MS


def test_default_delay_is_500ms():
    pacer = Pacer()
    assert pacer.delay_ms == DEFAULT_DELAY_MS == 500
    assert pacer.delay_seconds == 0.5


def test_negative_delay_rejected():
    with pytest.raises(ValueError):
        Pacer(-1)


def test_pause_sleeps_for_the_configured_interval():
    slept = []

    async def fake_sleep(seconds):
        slept.append(seconds)

    asyncio.run(Pacer(250, sleep=fake_sleep).pause())
    assert slept == [0.25]
