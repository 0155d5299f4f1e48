# engine/assessment/navigator.py
"""
Navigation linéaire dans l'assessment. ZÉRO accès DB.

État : (part_index, question_index)
  0 ≤ part_index < nombre de parties
  0 ≤ question_index < nombre de questions de la partie

Transitions :
  next()      question suivante, puis partie suivante à l'index 0.
              No-op en position terminale.
  previous()  symétrique. No-op à l'origine.

Gating :
  - avancer exige une réponse à la question courante ;
  - quitter la dernière question d'une partie exige la partie complète ;
  - soumettre exige la position terminale et toutes les réponses.

Pas d'accès direct à une question arbitraire.

Appelé par : modules/assessment/service.py
"""
from typing import Dict, List, Optional


class NavigationError(Exception):
    """Transition refusée par le gating (→ 400 côté router)."""


class AssessmentNavigator:

    def __init__(
        self,
        parts: List[Dict],                       # get_questions_by_part()
        answers: Optional[Dict[int, str]] = None,
        part_index: int = 0,
        question_index: int = 0,
    ):
        if not parts or any(not p["questions"] for p in parts):
            raise ValueError("Banque de questions vide.")
        if not 0 <= part_index < len(parts):
            raise ValueError(f"part_index hors limites : {part_index}")
        if not 0 <= question_index < len(parts[part_index]["questions"]):
            raise ValueError(f"question_index hors limites : {question_index}")

        self.parts = parts
        self.answers: Dict[int, str] = dict(answers or {})
        self.part_index = part_index
        self.question_index = question_index

    # ── Position ─────────────────────────────────────────────

    @property
    def current_part(self) -> Dict:
        return self.parts[self.part_index]

    @property
    def current_question(self) -> Dict:
        return self.current_part["questions"][self.question_index]

    @property
    def is_last_in_part(self) -> bool:
        return self.question_index == len(self.current_part["questions"]) - 1

    @property
    def is_last_part(self) -> bool:
        return self.part_index == len(self.parts) - 1

    @property
    def is_origin(self) -> bool:
        return self.part_index == 0 and self.question_index == 0

    @property
    def is_terminal(self) -> bool:
        return self.is_last_part and self.is_last_in_part

    # ── Complétion ───────────────────────────────────────────

    def is_answered(self, question_id: int) -> bool:
        return bool(self.answers.get(question_id))

    def is_part_complete(self, part_index: int) -> bool:
        return all(self.is_answered(q["id"]) for q in self.parts[part_index]["questions"])

    def is_complete(self) -> bool:
        return all(self.is_part_complete(i) for i in range(len(self.parts)))

    def answered_count(self) -> int:
        return sum(
            1 for p in self.parts for q in p["questions"] if self.is_answered(q["id"])
        )

    def total_questions(self) -> int:
        return sum(len(p["questions"]) for p in self.parts)

    # ── Gates ────────────────────────────────────────────────

    def can_go_next(self) -> bool:
        if self.is_terminal:
            return False
        if not self.is_answered(self.current_question["id"]):
            return False
        if self.is_last_in_part and not self.is_part_complete(self.part_index):
            return False
        return True

    def can_go_previous(self) -> bool:
        return not self.is_origin

    def can_submit(self) -> bool:
        return self.is_terminal and self.is_complete()

    # ── Transitions ──────────────────────────────────────────

    def next(self) -> None:
        if self.is_terminal:
            return
        if not self.can_go_next():
            if not self.is_answered(self.current_question["id"]):
                raise NavigationError("Please answer the current question before continuing.")
            raise NavigationError(
                f"Please answer all questions in {self.current_part['part']} before continuing."
            )

        if not self.is_last_in_part:
            self.question_index += 1
        else:
            self.part_index += 1
            self.question_index = 0

    def previous(self) -> None:
        if self.is_origin:
            return
        if self.question_index > 0:
            self.question_index -= 1
        else:
            self.part_index -= 1
            self.question_index = len(self.current_part["questions"]) - 1

    def handle_answer_change(self, question_id: int, option: str) -> None:
        """Enregistre le texte complet de l'option choisie pour la question courante."""
        question = self.current_question
        if question_id != question["id"]:
            raise NavigationError(
                f"Question {question_id} is not the current question ({question['id']})."
            )
        if option not in question["options"]:
            raise NavigationError(f"Invalid option for question {question_id}.")
        self.answers[question_id] = option

    # ── Vue ──────────────────────────────────────────────────

    def to_view(self) -> Dict:
        """Projection sérialisable renvoyée par chaque endpoint de navigation."""
        return {
            "current_part_index": self.part_index,
            "current_question_index": self.question_index,
            "part": self.current_part["part"],
            "part_count": len(self.parts),
            "questions_in_part": len(self.current_part["questions"]),
            "question": self.current_question,
            "selected_option": self.answers.get(self.current_question["id"]),
            "answered_count": self.answered_count(),
            "total_questions": self.total_questions(),
            "can_go_next": self.can_go_next(),
            "can_go_previous": self.can_go_previous(),
            "can_submit": self.can_submit(),
        }
