import django
import pypandoc
import pytest
from django.conf import settings


def pytest_configure(config):
    if not settings.configured:
        settings.configure(
            INSTALLED_APPS=["pastebin"],
            TEMPLATES=[
                {
                    "BACKEND": "django.template.backends.django.DjangoTemplates",
                    "APP_DIRS": True,
                }
            ],
        )
        django.setup()


def _pandoc_available() -> bool:
    try:
        pypandoc.get_pandoc_version()
    except OSError:
        return False
    return True


@pytest.fixture(scope="session")
def pandoc():
    """Skip tests that need a pandoc binary when none is installed."""
    if not _pandoc_available():
        pytest.skip("pandoc is not available")
