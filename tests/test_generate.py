import pytest
from mnemonic import Mnemonic

from sigillium.generate import STRENGTHS, generate_phrase, rehearsal_keypair
from sigillium.keys import derive_keypair


def test_strengths_cover_every_phrase_length():
    assert STRENGTHS == {12: 128, 15: 160, 18: 192, 21: 224, 24: 256}


@pytest.mark.parametrize("words", [12, 15, 18, 21, 24])
def test_generated_phrases_validate(words):
    phrase = generate_phrase(words)
    assert len(phrase.split()) == words
    assert Mnemonic("english").check(phrase)


def test_generated_phrases_differ():
    assert generate_phrase() != generate_phrase()


@pytest.mark.parametrize("words", [0, 11, 13, 25])
def test_unsupported_lengths(words):
    with pytest.raises(ValueError):
        generate_phrase(words)


def test_rehearsal_keypair_matches_derivation():
    phrase, keypair = rehearsal_keypair(12)
    with keypair, derive_keypair(phrase) as again:
        assert keypair == again
