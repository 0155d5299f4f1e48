# app/shared/models/Report.py
"""
Rapport individuel produit par le service d'analyse.

Les sections sont des objets JSON opaques : ce service ne les calcule pas,
il les stocke, les filtre (paid / non paid) et les pagine.
Toute section optionnelle peut être NULL → état "absent" côté rendu.

genius_factor_profile (JSON)
  {
    "primary_genius_factor": "Tech Genius",
    "secondary_genius_factor": "Social Genius",
    "key_strengths": [...],
    "energy_sources": [...],
    "description": "..."
  }
"""
from sqlalchemy import Column, Integer, String, Float, DateTime, JSON, Text, ForeignKey
from sqlalchemy.sql import func

from app.core.database import Base


class IndividualEmployeeReport(Base):
    __tablename__ = "individual_employee_reports"

    id          = Column(Integer, primary_key=True, index=True)
    user_id     = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    hr_id       = Column(String, nullable=True, index=True)
    departement = Column(String, nullable=True)

    executive_summary   = Column(Text,  nullable=True)
    genius_factor_score = Column(Float, nullable=True)   # 0 – 100

    genius_factor_profile             = Column(JSON, nullable=True)
    current_role_alignment_analysis   = Column(JSON, nullable=True)
    internal_career_opportunities     = Column(JSON, nullable=True)
    retention_and_mobility_strategies = Column(JSON, nullable=True)
    development_action_plan           = Column(JSON, nullable=True)
    personalized_resources            = Column(JSON, nullable=True)
    data_sources_and_methodology      = Column(JSON, nullable=True)
    risk_analysis                     = Column(JSON, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self):
        return f"<IndividualEmployeeReport id={self.id} user={self.user_id} score={self.genius_factor_score}>"
