"""Tests for slug normalization."""

from uuid import uuid4

import pytest

from app.catalog.slugs import normalized_slug, slugify


class TestSlugify:
    """Tests for slugify."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Men's Chill Crew Neck Sweatshirt", "mens-chill-crew-neck-sweatshirt"),
            ("  Relaxed T Logo Hat  ", "relaxed-t-logo-hat"),
            ("Kids Cybertruck Long-Sleeve Tee", "kids-cybertruck-long-sleeve-tee"),
            ("Made on Earth by Humans / Onesie", "made-on-earth-by-humans-onesie"),
            ("already-a-slug", "already-a-slug"),
            ("UPPER_case__Title", "upper-case-title"),
            ("Blusa de Algodón", "blusa-de-algodon"),
            ("Crème Brûlée Socks", "creme-brulee-socks"),
            ("!!!", ""),
            ("  -  ", ""),
        ],
    )
    def test_normalizes(self, text: str, expected: str) -> None:
        assert slugify(text) == expected

    def test_idempotent(self) -> None:
        """Slugifying a slug leaves it unchanged."""
        slug = slugify("Women's Cropped Puffer Jacket")
        assert slugify(slug) == slug


class TestNormalizedSlug:
    """Tests for normalized_slug."""

    def test_returns_slug(self) -> None:
        assert normalized_slug("Relaxed T Logo Hat") == "relaxed-t-logo-hat"

    @pytest.mark.parametrize("text", ["!!!", "???", "  -  ", "日本"])
    def test_empty_slug_rejected(self, text: str) -> None:
        with pytest.raises(ValueError, match="does not produce a slug"):
            normalized_slug(text)

    def test_uuid_slug_rejected(self) -> None:
        with pytest.raises(ValueError, match="slug must not be a UUID"):
            normalized_slug(str(uuid4()).upper())
