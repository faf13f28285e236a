import enum


class ProgramType(str, enum.Enum):
    """학위 과정 유형 (board: 국가 면허시험 대상 과정)"""
    BOARD = "board"
    NON_BOARD = "non_board"


class QuestionType(str, enum.Enum):
    """설문 문항 유형 (scale 문항만 PO 점수에 반영)"""
    SCALE = "scale"
    TEXT = "text"


class TargetRole(str, enum.Enum):
    STUDENT = "student"
    GRADUATE = "graduate"
    EMPLOYER = "employer"
