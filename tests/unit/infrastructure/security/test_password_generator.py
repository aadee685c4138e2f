"""
Tests pour SecurePasswordGenerator.
"""

import pytest

from bookstore_broker.infrastructure.security import SecurePasswordGenerator
from bookstore_broker.utils.constants import PASSWORD_CHARS


class TestSecurePasswordGenerator:
    """Tests de la generation de mots de passe."""

    def test_alphabet_has_62_symbols(self):
        assert len(set(PASSWORD_CHARS)) == 62
        assert PASSWORD_CHARS.isalnum()

    def test_default_length(self):
        assert len(SecurePasswordGenerator().generate()) == 12

    def test_configured_length(self):
        generator = SecurePasswordGenerator(length=20)

        assert generator.length == 20
        assert len(generator.generate()) == 20

    def test_only_alphabet_characters(self):
        generator = SecurePasswordGenerator()

        for _ in range(50):
            assert set(generator.generate()) <= set(PASSWORD_CHARS)

    def test_consecutive_passwords_differ(self):
        generator = SecurePasswordGenerator()

        assert generator.generate() != generator.generate()

    @pytest.mark.parametrize("length,alphabet", [(0, PASSWORD_CHARS), (12, "")])
    def test_invalid_configuration(self, length, alphabet):
        with pytest.raises(ValueError):
            SecurePasswordGenerator(length=length, alphabet=alphabet)
