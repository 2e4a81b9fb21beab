from __future__ import annotations

import logging
import sys

import pastemyst

logger: logging.Logger = logging.getLogger(__name__)


def check_languages() -> None:
    logger.info("Checking languages...")
    assert pastemyst.get_language_by_name("rust").name == "Rust"
    assert pastemyst.get_language_by_extension(".py").name == "Python"


def check_expiration() -> None:
    logger.info("Checking expiration...")
    spec = pastemyst.parse_expiration("2d")
    assert pastemyst.expires_into_unix(0, spec) == 172_800


def check_user_exists() -> None:
    logger.info("Checking user_exists...")
    with pastemyst.PasteMystClient() as client:
        assert client.user_exists("codemyst")


def main() -> None:
    r"""Run all package checks to validate installation and
    functionality."""
    try:
        check_languages()
        check_expiration()
        check_user_exists()

        logger.info("✅ All package checks passed successfully!")
    except Exception:
        logger.exception("❌ Package check failed")
        sys.exit(1)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
