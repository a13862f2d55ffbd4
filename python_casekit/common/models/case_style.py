from enum import Enum

class CaseStyle(str, Enum):
    CAMEL = "camelCase"
    KEBAB = "kebab-case"
    DOT = "dot.case"

    @classmethod
    def _missing_(cls, value):
        # Accept member names and short aliases: "camel", "KEBAB", "dot_case"
        if not isinstance(value, str):
            return None
        key = value.strip().lower().replace("-", "_").replace(".", "_")
        for member in cls:
            name = member.name.lower()
            if key in (name, f"{name}_case", member.value.lower()):
                return member
        return None
