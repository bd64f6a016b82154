import os

import pytest

from docbox.config import DocboxConfig


def pytest_collection_modifyitems(config: pytest.Config, items: list) -> None:
    missing = not (os.getenv("DOCBOX_BASE_URL") and os.getenv("DOCBOX_API_KEY"))
    if not missing:
        return
    mark_expr = getattr(config.option, "markexpr", "")
    if "integration" in mark_expr:
        return
    skip = pytest.mark.skip(reason="DOCBOX_BASE_URL / DOCBOX_API_KEY not set")
    for item in items:
        if item.get_closest_marker("integration"):
            item.add_marker(skip)


@pytest.fixture(scope="session")
def docbox_config() -> DocboxConfig:
    base_url = os.getenv("DOCBOX_BASE_URL")
    api_key = os.getenv("DOCBOX_API_KEY")
    if not base_url or not api_key:
        pytest.fail("DOCBOX_BASE_URL and DOCBOX_API_KEY must be set to run integration tests.")
    port = os.getenv("DOCBOX_PORT")
    return DocboxConfig(
        base_url=base_url,
        api_key=api_key,
        cloud_id=os.getenv("DOCBOX_CLOUD_ID") or None,
        port=int(port) if port else None,
    )
