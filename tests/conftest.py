"""
Pytest configuration and shared fixtures for casefix tests.

This module provides common test fixtures, configuration, and utilities
used across the test suite.
"""

import json
import os

import pytest

from casefix.naming import RewritePolicy, SymbolDescriptor
from casefix.utils.config import CasefixConfig, set_config
from casefix.utils.constants import CapitalizationStrategy, NamingStyle


CASEFIX_ENV_VARS = (
    "CASEFIX_CONFIG",
    "CASEFIX_STRATEGY",
    "CASEFIX_RETAIN_DIGITS",
    "CASEFIX_LOG_LEVEL",
)

# Identifiers exercising punctuation, digits, acronyms and degenerate input
IDENTIFIER_CORPUS = [
    "",
    "_",
    "___",
    "$$$",
    "my_variable",
    "userName2id",
    "HTTPServer",
    "XMLHttpRequest",
    "2fast",
    "123",
    "a",
    "A",
    "ABc",
    "A_B",
    "__dunder__",
    "MAX_SIZE",
    "max-size",
    "camelCase",
    "PascalCase",
    "snake_case_name",
    "with space",
    "ünïcödé",
    "name$with$dollars",
    "x1y2z3",
    "___a___",
    "a__b__c",
    "Q9",
    "9Q",
    "get_HTTP_response2",
    "already_Mixed_Case9x",
    "ID",
    "iD",
    "_private",
    "trailing_",
    "ALLCAPS",
    "mixed123CASE456name",
]


# Isolation
@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Run each test in an empty directory with no casefix env overrides."""
    for name in CASEFIX_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def identifier_corpus():
    return list(IDENTIFIER_CORPUS)


# Descriptor fixtures
@pytest.fixture
def descriptors():
    """One descriptor per naming style plus exempt kinds."""
    return {
        'type': SymbolDescriptor.type_(),
        'method': SymbolDescriptor.method(),
        'local': SymbolDescriptor.local(),
        'const': SymbolDescriptor.const_field(public=True),
        'static_readonly': SymbolDescriptor.static_readonly_field(),
        'private_const': SymbolDescriptor.const_field(public=False),
        'field': SymbolDescriptor.field(),
        'other': SymbolDescriptor.other(),
    }


@pytest.fixture
def checked_descriptors(descriptors):
    """Descriptors that map to a naming style, with that style."""
    return [
        (descriptors['type'], NamingStyle.UPPER_CAMEL_CASE),
        (descriptors['method'], NamingStyle.UPPER_CAMEL_CASE),
        (descriptors['local'], NamingStyle.LOWER_CAMEL_CASE),
        (descriptors['const'], NamingStyle.SCREAMING_SNAKE_CASE),
        (descriptors['static_readonly'], NamingStyle.SCREAMING_SNAKE_CASE),
    ]


# Policy fixtures
@pytest.fixture
def word_split_policy():
    return RewritePolicy(strategy=CapitalizationStrategy.WORD_SPLIT)


@pytest.fixture
def no_digits_policy():
    return RewritePolicy(retain_digits=False)


@pytest.fixture
def all_policies(word_split_policy, no_digits_policy):
    """Every combination of strategy and digit retention."""
    return [
        RewritePolicy(),
        word_split_policy,
        no_digits_policy,
        RewritePolicy(retain_digits=False, strategy=CapitalizationStrategy.WORD_SPLIT),
    ]


# Configuration fixtures
@pytest.fixture
def write_config(tmp_path):
    """Write a configuration dict to a JSON file and return its path."""
    def _write(data, filename="casefix.json"):
        path = tmp_path / filename
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f)
        return str(path)

    return _write


@pytest.fixture
def default_config(tmp_path):
    """Configuration backed by a file that does not exist."""
    return CasefixConfig(str(tmp_path / "missing.json"))


# Pytest hooks for test collection and reporting
def pytest_collection_modifyitems(config, items):
    """Add markers based on test path."""
    for item in items:
        path = str(item.fspath)
        if f"{os.sep}unit{os.sep}" in path:
            item.add_marker(pytest.mark.unit)
        elif f"{os.sep}integration{os.sep}" in path:
            item.add_marker(pytest.mark.integration)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
