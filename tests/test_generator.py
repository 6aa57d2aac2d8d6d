import pytest

from passgen_pro.charsets import GenerationOptions, build_charset
from passgen_pro.errors import ConfigurationError
from passgen_pro.generator import WORDLIST, generate_passphrase, generate_password


def fixed(*values):
    return lambda n: bytes(values[:n])


def exploding_source(n):
    raise AssertionError("random source must not be used")


@pytest.mark.parametrize(
    "options",
    [
        GenerationOptions(),
        GenerationOptions(exclude_confusing=True),
        GenerationOptions(exclude_unsafe_symbols=True),
        GenerationOptions(uppercase=False, lowercase=False, symbols=False),
        GenerationOptions(numbers=False, symbols=False, exclude_confusing=True),
    ],
)
@pytest.mark.parametrize("length", [8, 16, 32])
def test_password_length_and_charset(options, length):
    charset = set(build_charset(options))
    password = generate_password(length, options)
    assert len(password) == length
    assert set(password) <= charset


def test_password_derivation_from_injected_bytes():
    # full charset has 88 entries: 0 -> 'A', 1 -> 'B', 26 -> 'a', 255 % 88 = 79 -> '}'
    assert generate_password(4, GenerationOptions(), fixed(0, 1, 26, 255)) == "ABa}"


def test_password_without_categories_fails_before_drawing():
    options = GenerationOptions(uppercase=False, lowercase=False, numbers=False, symbols=False)
    with pytest.raises(ConfigurationError):
        generate_password(16, options, exploding_source)


def test_configuration_error_is_a_value_error():
    options = GenerationOptions(uppercase=False, lowercase=False, numbers=False, symbols=False)
    with pytest.raises(ValueError):
        generate_password(8, options)


def test_wordlist_shape():
    assert len(WORDLIST) >= 40
    for word in WORDLIST:
        assert word.isalpha()
        assert word == word.lower()


def test_passphrase_four_words_default_separator():
    phrase = generate_passphrase(4)
    words = phrase.split("-")
    assert len(words) == 4
    assert all(word in WORDLIST for word in words)


def test_passphrase_derivation_from_injected_bytes():
    assert generate_passphrase(4, source=fixed(0, 40, 79, 255)) == "aurora-aurora-pioneer-phoenix"


def test_passphrase_custom_separator():
    phrase = generate_passphrase(3, separator=" ", source=fixed(1, 2, 3))
    assert phrase == "beacon crystal diamond"
