"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def sample_messages():
    """Sample chat messages covering the main formatting cases."""
    return [
        "hello world",
        '"Hi there," she said, waving.',
        "*already wrapped*",
        "",
        "   ",
        'He nodded. "Fine."\n\nThen he left.',
    ]


@pytest.fixture
def tricky_texts():
    """Inputs that exercise delimiter edge cases."""
    return [
        "hello world",
        '"hello" said Bob',
        "*already wrapped*",
        "she said **strongly** yes",
        "",
        'he said "hello',
        "a *b",
        'a *b "c" d',
        '*a*b "q" c',
        "**bold** rest",
        "rest **bold**",
        "***x***",
        "***",
        "**",
        "* *",
        '"q"**b**',
        '*x "q* y"',
        'x "y *z* w',
        '*a*b *x "q" y*',
        "*a\nb*",
        'line one\nline "two" end\n\n*three*',
        "hello\r\nworld",
        " spaced out ",
        "\tindented",
        "a*b*",
        "*a**b*",
        '""',
        '"" tail',
        "trailing space   \n\n\n  leading space",
    ]
