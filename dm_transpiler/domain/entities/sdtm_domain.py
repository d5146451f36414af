from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SDTMVariable:
    name: str
    label: str
    type: str
    length: int
    core: str | None = None

    def pandas_dtype(self) -> str:
        if self.type == "Num":
            return "Int64"
        return "string"


@dataclass(frozen=True, slots=True)
class SDTMDomain:
    code: str
    description: str
    class_name: str
    structure: str
    label: str | None
    variables: tuple[SDTMVariable, ...]
    dataset_name: str | None = None

    def variable_names(self) -> tuple[str, ...]:
        return tuple(var.name for var in self.variables)

    def variable(self, name: str) -> SDTMVariable | None:
        for var in self.variables:
            if var.name == name:
                return var
        return None

    def resolved_dataset_name(self) -> str:
        name = (self.dataset_name or self.code).upper()
        return name[:8]


DM_VARIABLES: tuple[SDTMVariable, ...] = (
    SDTMVariable("STUDYID", "Study Identifier", "Char", 20, "Req"),
    SDTMVariable("DOMAIN", "Domain Abbreviation", "Char", 2, "Req"),
    SDTMVariable("USUBJID", "Unique Subject Identifier", "Char", 40, "Req"),
    SDTMVariable("SUBJID", "Subject Identifier for the Study", "Char", 20, "Req"),
    SDTMVariable("RFSTDTC", "Subject Reference Start Date/Time", "Char", 19, "Exp"),
    SDTMVariable("RFENDTC", "Subject Reference End Date/Time", "Char", 19, "Exp"),
    SDTMVariable("RFXSTDTC", "Date/Time of First Study Treatment", "Char", 19, "Exp"),
    SDTMVariable("RFXENDTC", "Date/Time of Last Study Treatment", "Char", 19, "Exp"),
    SDTMVariable("RFICDTC", "Date/Time of Informed Consent", "Char", 19, "Exp"),
    SDTMVariable("RFPENDTC", "Date/Time of End of Participation", "Char", 19, "Exp"),
    SDTMVariable("DTHDTC", "Date/Time of Death", "Char", 19, "Exp"),
    SDTMVariable("DTHFL", "Subject Death Flag", "Char", 1, "Exp"),
    SDTMVariable("SITEID", "Study Site Identifier", "Char", 10, "Req"),
    SDTMVariable("BRTHDTC", "Date/Time of Birth", "Char", 19, "Perm"),
    SDTMVariable("AGE", "Age", "Num", 8, "Exp"),
    SDTMVariable("AGEU", "Age Units", "Char", 10, "Exp"),
    SDTMVariable("SEX", "Sex", "Char", 1, "Req"),
    SDTMVariable("RACE", "Race", "Char", 40, "Exp"),
    SDTMVariable("ARMCD", "Planned Arm Code", "Char", 20, "Exp"),
    SDTMVariable("ARM", "Description of Planned Arm", "Char", 40, "Exp"),
    SDTMVariable("ACTARMCD", "Actual Arm Code", "Char", 20, "Exp"),
    SDTMVariable("ACTARM", "Description of Actual Arm", "Char", 40, "Exp"),
    SDTMVariable("ARMNRS", "Reason Arm and/or Actual Arm is Null", "Char", 40, "Exp"),
    SDTMVariable("COUNTRY", "Country", "Char", 3, "Req"),
)

DM_DOMAIN = SDTMDomain(
    code="DM",
    description="Demographics",
    class_name="Special-Purpose",
    structure="One record per subject",
    label="Demographics",
    variables=DM_VARIABLES,
)
