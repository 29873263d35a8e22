"""Tests for decoder configuration."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from openrouter_response.config import DecoderConfig


class TestDecoderConfig:
    """Tests for DecoderConfig model."""

    def test_default_policy(self):
        assert DecoderConfig().invalid_arguments == "raise"

    def test_omit_policy(self):
        assert DecoderConfig(invalid_arguments="omit").invalid_arguments == "omit"

    def test_invalid_policy(self):
        with pytest.raises(ValidationError):
            DecoderConfig(invalid_arguments="ignore")

    def test_from_env_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert DecoderConfig.from_env().invalid_arguments == "raise"

    def test_from_env_omit(self):
        with patch.dict(os.environ, {"OPENROUTER_INVALID_ARGUMENTS": " Omit "}, clear=True):
            assert DecoderConfig.from_env().invalid_arguments == "omit"

    def test_from_env_unknown(self):
        with patch.dict(os.environ, {"OPENROUTER_INVALID_ARGUMENTS": "skip"}, clear=True):
            with pytest.raises(ValueError, match="OPENROUTER_INVALID_ARGUMENTS"):
                DecoderConfig.from_env()
