# app/modules/assessment/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict
from datetime import datetime


# ── Banque de questions ────────────────────────────────────

class QuestionOut(BaseModel):
    id: int
    type: str
    question: str
    options: List[str]
    category: str
    section: str


class PartOut(BaseModel):
    part: str
    questions: List[QuestionOut]


class UserStatusOut(BaseModel):
    paid: bool
    has_employee_profile: bool
    is_profile_complete: bool


class QuestionsOut(BaseModel):
    parts: List[PartOut]
    user_status: UserStatusOut


# ── Progression ────────────────────────────────────────────

class ProgressSnapshot(BaseModel):
    """Checkpoint complet, tel que stocké dans assessment_progress."""
    answers: Dict[int, str] = Field(default_factory=dict)
    current_part_index: int = Field(0, ge=0)
    current_question_index: int = Field(0, ge=0)
    time_spent_seconds: int = Field(0, ge=0)
    timestamp: datetime
    model_config = ConfigDict(from_attributes=True)


class AnswerIn(BaseModel):
    question_id: int
    option: str


class TickIn(BaseModel):
    seconds: int = Field(1, ge=0, le=3600)


class NavigationOut(BaseModel):
    current_part_index: int
    current_question_index: int
    part: str
    part_count: int
    questions_in_part: int
    question: QuestionOut
    selected_option: Optional[str] = None
    answered_count: int
    total_questions: int
    can_go_next: bool
    can_go_previous: bool
    can_submit: bool
    answers: Dict[int, str]
    time_spent_seconds: int
    timestamp: Optional[datetime] = None
    has_saved_progress: bool


class ResetOut(BaseModel):
    cleared: bool


# ── Soumission ─────────────────────────────────────────────

class AnalysisResultOut(BaseModel):
    part: str
    majorityOptions: Optional[List[str]] = None
    maxCount: int = 0
    model_config = ConfigDict(extra="allow")


class SubmissionOut(BaseModel):
    status: str
    results: List[AnalysisResultOut]
    redirect_to: str
    redirect_delay_seconds: int
