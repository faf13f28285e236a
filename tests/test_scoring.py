from models.board_exams import BoardExamResult
from models.competencies import CompetencyPoMapping, CompetencyRating
from models.courses import CoursePoMapping
from models.enrollments import Enrollment
from models.outcomes import ProgramOutcome
from models.programs import Program
from models.surveys import SurveyAnswer, SurveyQuestion
from services.analytics.scoring import compute_po_score, round1, round_percent

PO = ProgramOutcome(id=1, program_id=10, code="PO1", description="Apply engineering knowledge")
BOARD = Program(id=10, code="BSCE", name="Civil Engineering", type="board")
NON_BOARD = Program(id=10, code="BSIT", name="Information Technology", type="non_board")


def score(po=PO, **overrides):
    sources = dict(
        course_mappings=[],
        enrollments=[],
        questions=[],
        answers=[],
        competency_mappings=[],
        ratings=[],
        program=NON_BOARD,
        board_exams=[],
    )
    sources.update(overrides)
    return compute_po_score(po, **sources)


def test_round_half_up():
    assert round1(3.25) == 3.3
    assert round1(4.45) == 4.5
    assert round1(0) == 0
    assert round_percent(0.655) == 66
    assert round_percent(0.5) == 50


def test_po_without_any_data_scores_zero():
    result = score()
    assert result.overall_score == 0
    assert result.grade_count == result.survey_count == result.feedback_count == 0
    assert result.is_board_program is False


def test_grade_only_score():
    result = score(
        course_mappings=[CoursePoMapping(course_id=1, po_id=1)],
        enrollments=[
            Enrollment(course_id=1, grade=80, term="Fall 2023", academic_year="2023-2024"),
            Enrollment(course_id=1, grade=100, term="Fall 2023", academic_year="2023-2024"),
            Enrollment(course_id=2, grade=10, term="Fall 2023", academic_year="2023-2024"),
        ],
    )
    assert result.avg_grade == 90.0
    assert result.grade_count == 2
    assert result.overall_score == 4.5


def test_board_exam_only_score_for_board_program():
    result = score(
        program=BOARD,
        board_exams=[
            BoardExamResult(program_id=10, exam_name="CELE", passers=8, takers=10),
            BoardExamResult(program_id=10, exam_name="CELE", passers=5, takers=10),
            BoardExamResult(program_id=99, exam_name="Other", passers=0, takers=10),
        ],
    )
    assert result.board_exam_score == 3.3
    assert result.overall_score == 3.3
    assert result.is_board_program is True


def test_board_exam_ignored_for_non_board_program():
    result = score(
        program=NON_BOARD,
        board_exams=[BoardExamResult(program_id=10, exam_name="CELE", passers=8, takers=10)],
    )
    # 점수는 계산되지만 종합 점수에는 반영되지 않음
    assert result.board_exam_score == 4.0
    assert result.overall_score == 0


def test_survey_skips_text_and_unlinked_answers():
    result = score(
        questions=[
            SurveyQuestion(id=1, survey_id=1, text="Rate", type="scale", linked_po_id=1),
            SurveyQuestion(id=2, survey_id=1, text="Comments", type="text", linked_po_id=1),
            SurveyQuestion(id=3, survey_id=1, text="Other PO", type="scale", linked_po_id=2),
        ],
        answers=[
            SurveyAnswer(response_id=1, question_id=1, answer_value=4),
            SurveyAnswer(response_id=2, question_id=1, answer_value=5),
            SurveyAnswer(response_id=1, question_id=2, answer_text="great"),
            SurveyAnswer(response_id=1, question_id=3, answer_value=1),
        ],
    )
    assert result.survey_count == 2
    assert result.avg_survey == 4.5
    assert result.overall_score == 4.5


def test_feedback_through_competency_mapping():
    result = score(
        competency_mappings=[CompetencyPoMapping(competency_id=7, po_id=1)],
        ratings=[
            CompetencyRating(competency_id=7, rating=3),
            CompetencyRating(competency_id=7, rating=4),
            CompetencyRating(competency_id=8, rating=1),
        ],
    )
    assert result.feedback_count == 2
    assert result.avg_feedback == 3.5
    assert result.overall_score == 3.5


def test_overall_is_mean_of_present_sub_scores():
    result = score(
        program=BOARD,
        course_mappings=[CoursePoMapping(course_id=1, po_id=1)],
        enrollments=[Enrollment(course_id=1, grade=80, term="T", academic_year="2024")],   # 4.0
        questions=[SurveyQuestion(id=1, survey_id=1, text="Q", type="scale", linked_po_id=1)],
        answers=[SurveyAnswer(response_id=1, question_id=1, answer_value=5)],            # 5.0
        competency_mappings=[CompetencyPoMapping(competency_id=1, po_id=1)],
        ratings=[CompetencyRating(competency_id=1, rating=3)],                            # 3.0
        board_exams=[BoardExamResult(program_id=10, exam_name="E", passers=4, takers=10)],  # 2.0
    )
    assert result.overall_score == 3.5


def test_zero_grade_average_is_treated_as_missing():
    result = score(
        course_mappings=[CoursePoMapping(course_id=1, po_id=1)],
        enrollments=[Enrollment(course_id=1, grade=0, term="T", academic_year="2024")],
        competency_mappings=[CompetencyPoMapping(competency_id=1, po_id=1)],
        ratings=[CompetencyRating(competency_id=1, rating=4)],
    )
    assert result.grade_count == 1
    assert result.avg_grade == 0
    assert result.overall_score == 4.0


def test_missing_program_is_not_board():
    result = score(
        program=None,
        board_exams=[BoardExamResult(program_id=10, exam_name="E", passers=10, takers=10)],
    )
    assert result.is_board_program is False
    assert result.overall_score == 0
