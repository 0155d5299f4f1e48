# engine/assessment/tally.py
"""
Mise en forme des réponses pour le service de scoring. ZÉRO accès DB.

Deux structures indépendantes, toutes deux envoyées :
  data       : [{part, optionCounts: {"A": 2, "B": 1}}]   une entrée par partie
  allAnswers : [{id, part, section, question, selectedOption}]   une entrée par question

Toutes les lettres présentes sont comptées (A → I pour la partie IV).
Une lettre jamais choisie n'apparaît pas dans optionCounts.

Appelé par : modules/assessment/service.py
"""
from collections import Counter
from typing import Dict, List, Optional


def option_letter(option: str) -> str:
    """'B) Collaborer...' → 'B'."""
    return option.strip()[:1].upper()


def find_unanswered(parts: List[Dict], answers: Dict[int, str]) -> List[int]:
    return [
        q["id"]
        for part in parts
        for q in part["questions"]
        if not answers.get(q["id"])
    ]


def build_option_counts(parts: List[Dict], answers: Dict[int, str]) -> List[Dict]:
    result = []
    for part in parts:
        counts = Counter(
            option_letter(answers[q["id"]])
            for q in part["questions"]
            if answers.get(q["id"])
        )
        result.append({"part": part["part"], "optionCounts": dict(sorted(counts.items()))})
    return result


def build_all_answers(parts: List[Dict], answers: Dict[int, str]) -> List[Dict]:
    return [
        {
            "id": q["id"],
            "part": part["part"],
            "section": q["section"],
            "question": q["question"],
            "selectedOption": answers.get(q["id"]),
        }
        for part in parts
        for q in part["questions"]
    ]


def build_submission_payload(
    parts: List[Dict],
    answers: Dict[int, str],
    user_id: str,
    hr_id: Optional[str],
    departement: str,
    employee_name: str,
    employee_email: str,
    is_paid: bool,
) -> Dict:
    """Corps exact attendu par POST {SCORING_PATH}."""
    return {
        "data": build_option_counts(parts, answers),
        "userId": user_id,
        "hrId": hr_id or "",
        "departement": departement,
        "employeeName": employee_name,
        "employeeEmail": employee_email,
        "is_paid": is_paid,
        "allAnswers": build_all_answers(parts, answers),
    }
