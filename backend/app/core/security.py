# backend/app/core/security.py
"""
Vérification des tokens du fournisseur d'auth externe.

Ce service n'émet aucun token : il ne fait que décoder le JWT
(sub = user id) signé avec le secret partagé.
"""
from typing import Any, Dict

from jose import jwt

from app.core.config import settings


def decode_token(token: str) -> Dict[str, Any]:
    """Lève JWTError si la signature ou l'expiration est invalide."""
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
