import pytest

DM_ENV_VARS = (
    "DM_STUDY_ID",
    "DM_SITE_ID",
    "DM_COUNTRY",
    "DM_DEMOGRAPHICS_FILE",
    "DM_EXPOSURE_FILE",
    "DM_OUTPUT_DIR",
    "DM_OUTPUT_FORMATS",
    "DM_MISSING_SUBJECT_POLICY",
)


@pytest.fixture(autouse=True)
def _isolated_dm_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep DM_* settings from the developer's shell out of the tests."""
    for name in DM_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
