"""Tests for per-submission seed derivation."""

from __future__ import annotations

from fakedata.content.seed import canonicalize_key, derive_seed, submission_seed


def test_canonicalize_key() -> None:
    assert canonicalize_key("  AB\t CD  ") == "AB CD"


def test_canonicalize_keeps_case() -> None:
    assert canonicalize_key("abc") != canonicalize_key("ABC")


def test_derive_seed_deterministic_and_distinct() -> None:
    assert derive_seed(7, "AJKD1234OMJU") == derive_seed(7, "AJKD1234OMJU")
    assert derive_seed(7, "AJKD1234OMJU") != derive_seed(7, "GENERIC12345")
    assert derive_seed(7, "AJKD1234OMJU") != derive_seed(8, "AJKD1234OMJU")


def test_derive_seed_range() -> None:
    seed = derive_seed(0, "x")
    assert 0 <= seed < 2**64


def test_submission_seed_unseeded() -> None:
    assert submission_seed(None, "AJKD1234OMJU") is None
    assert submission_seed(3, "AJKD1234OMJU") == derive_seed(3, "AJKD1234OMJU")
