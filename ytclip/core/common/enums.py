# File: ytclip/core/common/enums.py

from enum import Enum, IntEnum, unique

@unique
class FailureStage(str, Enum):
    VALIDATION = "validation"
    RETRIEVAL = "retrieval"
    TRANSCODE = "transcode"

@unique
class ExitCode(IntEnum):
    SUCCESS = 0
    VALIDATION = 1
    RETRIEVAL = 2
    TRANSCODE = 3
    INTERRUPTED = 130

@unique
class RetrievalMode(str, Enum):
    SECTIONS = "sections"
    FULL = "full"
