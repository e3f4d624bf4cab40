"""Shared pytest configuration for the json-eql-diff test suite."""

pytest_plugins = ["pytester"]
