from typing import ClassVar


class Defaults:
    STUDY_ID = "STUDY001"
    SITE_ID = "001"
    COUNTRY = "USA"
    DEMOGRAPHICS_FILE = "data/demographics.csv"
    EXPOSURE_FILE = "data/exposure.csv"
    OUTPUT_DIR = "output"
    OUTPUT_FORMATS: ClassVar[tuple[str, ...]] = ("csv", "xpt")
    MISSING_SUBJECT_POLICY = "skip"


class Constraints:
    AGE_MIN = 0
    AGE_MAX = 125
    STUDYID_MAX_LENGTH = 20
    XPT_MAX_NAME_LENGTH = 8
    XPT_MAX_COLUMN_LABEL_LENGTH = 40
    SUPPORTED_OUTPUT_FORMATS: ClassVar[frozenset[str]] = frozenset({"csv", "xpt"})
    MISSING_SUBJECT_POLICIES: ClassVar[frozenset[str]] = frozenset({"skip", "fail"})


class ControlledValues:
    DOMAIN = "DM"
    AGE_UNIT = "YEARS"
    RACE_UNKNOWN = "UNKNOWN"
    SEX_UNKNOWN = "U"
    ARM_NOT_ASSIGNED = "NOT ASSIGNED"


class MissingValues:
    STRING_MARKERS: ClassVar[frozenset[str]] = frozenset(
        {"NAN", "<NA>", "NONE", "NULL", "NAT"}
    )
