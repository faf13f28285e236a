from datetime import datetime

from models.board_exams import BoardExamResult
from models.competencies import CompetencyRating
from models.enrollments import Enrollment
from models.surveys import SurveyAnswer, SurveyResponse
from services.analytics.trends import board_exam_trend, feedback_trend, grade_trend_by_term, survey_trend


def test_grade_trend_uses_lexicographic_term_order():
    trend = grade_trend_by_term([
        Enrollment(course_id=1, grade=70, term="Spring 2023", academic_year="2022-2023"),
        Enrollment(course_id=1, grade=80, term="Fall 2023", academic_year="2023-2024"),
        Enrollment(course_id=2, grade=95, term="Fall 2023", academic_year="2023-2024"),
    ])
    assert [t.term for t in trend] == ["Fall 2023", "Spring 2023"]
    assert trend[0].avg_grade == 87.5
    assert trend[0].count == 2
    assert trend[1].avg_grade == 70.0


def test_board_exam_trend_by_year():
    trend = board_exam_trend([
        BoardExamResult(program_id=1, exam_name="A", exam_date="November 2024", passers=8, takers=10),
        BoardExamResult(program_id=2, exam_name="B", exam_date="2024-05-01", passers=5, takers=10),
        BoardExamResult(program_id=1, exam_name="A", exam_date="2023", passers=0, takers=0),
        BoardExamResult(program_id=1, exam_name="A", exam_date=None, passers=3, takers=3),
    ])
    assert [t.year for t in trend] == ["2023", "2024"]
    assert trend[0].passing_rate == 0
    assert (trend[1].passers, trend[1].takers, trend[1].passing_rate) == (13, 20, 65)


def test_survey_trend_counts_responses_and_averages_scale_answers():
    responses = [
        SurveyResponse(id=1, survey_id=1, submitted_at=datetime(2024, 2, 1)),
        SurveyResponse(id=2, survey_id=1, submitted_at=datetime(2024, 9, 1)),
        SurveyResponse(id=3, survey_id=1, submitted_at=datetime(2025, 1, 1)),
        SurveyResponse(id=4, survey_id=1, submitted_at=None),
    ]
    answers = [
        SurveyAnswer(response_id=1, question_id=1, answer_value=4),
        SurveyAnswer(response_id=2, question_id=1, answer_value=3),
        SurveyAnswer(response_id=2, question_id=2, answer_text="ok"),
        SurveyAnswer(response_id=4, question_id=1, answer_value=1),
    ]
    trend = survey_trend(responses, answers)
    assert [(t.year, t.responses, t.avg_rating) for t in trend] == [("2024", 2, 3.5), ("2025", 1, 0.0)]


def test_feedback_trend_counts_batch_or_created_year():
    ratings = [
        CompetencyRating(competency_id=1, batch="2023", rating=4, created_at=datetime(2024, 1, 1)),
        CompetencyRating(competency_id=1, batch=None, rating=2, created_at=datetime(2024, 6, 1)),
    ]
    trend = feedback_trend(ratings)
    # 첫 번째 평가는 batch(2023) 와 생성 연도(2024) 두 버킷에 모두 포함
    assert [(t.year, t.count, t.avg_rating) for t in trend] == [("2023", 1, 4.0), ("2024", 2, 3.0)]


def test_trends_on_empty_input():
    assert grade_trend_by_term([]) == []
    assert board_exam_trend([]) == []
    assert survey_trend([], []) == []
    assert feedback_trend([]) == []
