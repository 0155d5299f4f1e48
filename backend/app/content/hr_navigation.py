# app/content/hr_navigation.py
"""
Structure de navigation du tableau de bord RH.

SIDEBAR           : entrées principales (ordre d'affichage)
BOTTOM_NAVIGATION : profil / paramètres
PAGE_METADATA     : titre + sous-titre affichés dans la barre du haut.
                    Une route inconnue retombe sur la page d'accueil.

Appelé par : modules/hr/service.py
"""
from typing import Dict, List

HOME_PATH = "/hr-dashboard"

SIDEBAR: List[Dict] = [
    {"name": "Dashboard",         "href": "/hr-dashboard",                   "icon": "layout-dashboard"},
    {"name": "Departments",       "href": "/hr-dashboard/departments",       "icon": "building-2"},
    {"name": "Employees",         "href": "/hr-dashboard/employees",         "icon": "users"},
    {"name": "Assessments",       "href": "/hr-dashboard/assessments",       "icon": "file-text"},
    {"name": "Retention Risk",    "href": "/hr-dashboard/retention-risk",    "icon": "alert-triangle"},
    {"name": "Internal Mobility", "href": "/hr-dashboard/internal-mobility", "icon": "trending-up"},
    {"name": "Upload Employee",   "href": "/hr-dashboard/upload-employee",   "icon": "file-text"},
    {"name": "Upload Jobs",       "href": "/hr-dashboard/upload-jobs",       "icon": "file-text"},
]

BOTTOM_NAVIGATION: List[Dict] = [
    {"name": "Profile",  "href": "/hr-dashboard/profile",  "icon": "user"},
    {"name": "Settings", "href": "/hr-dashboard/settings", "icon": "settings"},
]

PAGE_METADATA: Dict[str, Dict[str, str]] = {
    "/hr-dashboard": {
        "title": "Dashboard Overview",
        "subtitle": "Company-wide analytics and insights",
    },
    "/hr-dashboard/departments": {
        "title": "Department Management",
        "subtitle": "Department-specific analytics and insights",
    },
    "/hr-dashboard/employees": {
        "title": "Employee Management",
        "subtitle": "Manage and track all employees",
    },
    "/hr-dashboard/assessments": {
        "title": "Assessment Center",
        "subtitle": "Track and manage career assessments",
    },
    "/hr-dashboard/retention-risk": {
        "title": "Retention Risk Analysis",
        "subtitle": "Identify and address retention risks",
    },
    "/hr-dashboard/internal-mobility": {
        "title": "Internal Mobility Tracking",
        "subtitle": "Track career movements and opportunities",
    },
    "/hr-dashboard/profile": {
        "title": "My Profile",
        "subtitle": "Manage your account settings",
    },
    "/hr-dashboard/upload-jobs": {
        "title": "Upload Jobs",
        "subtitle": "Publish open positions for internal mobility",
    },
}


def is_active(href: str, path: str) -> bool:
    """L'accueil n'est actif qu'en correspondance exacte, les autres par préfixe."""
    if href == HOME_PATH:
        return path == HOME_PATH
    return path.startswith(href)


def get_page_metadata(path: str) -> Dict[str, str]:
    return PAGE_METADATA.get(path.rstrip("/") or HOME_PATH, PAGE_METADATA[HOME_PATH])
