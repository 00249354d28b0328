"""
Shared fixtures for tweenkit tests.
"""

import pytest

from tweenkit import Animation, ManualFrameDriver, Scheduler, StyleElement


@pytest.fixture
def driver():
    return ManualFrameDriver()


@pytest.fixture
def scheduler(driver):
    return Scheduler(driver)


@pytest.fixture
def animation(scheduler):
    return Animation(scheduler=scheduler)


@pytest.fixture
def element():
    parent = StyleElement("body")
    return StyleElement("div", parent=parent)
