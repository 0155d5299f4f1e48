# app/shared/deps.py
"""
Dépendances FastAPI réutilisables dans tous les routers.
Injectées via Depends(), jamais appelées directement.
"""
from typing import Annotated, Optional
from fastapi import Depends, Header, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.database import get_db
from app.core.security import decode_token
from app.infra.analysis_client import AnalysisClient, get_analysis_client
from app.infra.realtime import RealtimeHub, get_realtime_hub
from app.shared.models import User
from app.shared.enums import UserRole

bearer = HTTPBearer()


async def get_user_from_token(token: str, db: AsyncSession) -> Optional[User]:
    """
    Décode le JWT du fournisseur externe et charge l'utilisateur actif.
    Retourne None si le token ou l'utilisateur est invalide.
    Partagé entre les routes HTTP et le websocket (token en query).
    """
    try:
        payload = decode_token(token)
    except JWTError:
        return None
    user_id = payload.get("sub")
    if user_id is None:
        return None

    result = await db.execute(select(User).where(User.id == str(user_id)))
    user = result.scalar_one_or_none()
    if not user or not user.is_active:
        return None
    return user


async def _get_user_from_token(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(bearer)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    user = await get_user_from_token(credentials.credentials, db)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token invalide ou expiré",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


# ── Deps publiques ─────────────────────────────────────────

async def get_current_user(
    user: Annotated[User, Depends(_get_user_from_token)],
) -> User:
    """Utilisateur authentifié (tout rôle)."""
    return user


async def get_current_employee(
    user: Annotated[User, Depends(_get_user_from_token)],
) -> User:
    """Exige le rôle EMPLOYEE (seul rôle qui passe l'assessment)."""
    if user.role != UserRole.EMPLOYEE:
        raise HTTPException(status_code=403, detail="Accès employé requis")
    return user


async def get_current_hr(
    user: Annotated[User, Depends(_get_user_from_token)],
) -> User:
    """Exige le rôle HR ou ADMIN."""
    if user.role not in (UserRole.HR, UserRole.ADMIN):
        raise HTTPException(status_code=403, detail="Accès RH requis")
    return user


async def verify_internal_key(
    x_internal_key: Annotated[Optional[str], Header()] = None,
) -> None:
    """Protège les endpoints appelés par le service d'analyse."""
    if not settings.INTERNAL_API_KEY or x_internal_key != settings.INTERNAL_API_KEY:
        raise HTTPException(status_code=403, detail="Clé interne invalide")


# ── Type aliases pour les routers ─────────────────────────
DbDep       = Annotated[AsyncSession, Depends(get_db)]
UserDep     = Annotated[User, Depends(get_current_user)]
EmployeeDep = Annotated[User, Depends(get_current_employee)]
HRDep       = Annotated[User, Depends(get_current_hr)]
InternalDep = Annotated[None, Depends(verify_internal_key)]
HubDep      = Annotated[RealtimeHub, Depends(get_realtime_hub)]
AnalysisDep = Annotated[AnalysisClient, Depends(get_analysis_client)]
