from .case_style import CaseStyle
