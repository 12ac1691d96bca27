"""Simple two-language (fr/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "fr": "SolarQuote",
        "en": "SolarQuote",
    },
    "nav_dashboard": {
        "fr": "Tableau de bord",
        "en": "Dashboard",
    },
    "nav_clients": {
        "fr": "Prospects",
        "en": "Prospects",
    },
    "nav_projects": {
        "fr": "Mes projets",
        "en": "My projects",
    },
    "nav_new_quote": {
        "fr": "Nouveau devis",
        "en": "New quote",
    },
    "btn_sign_in": {
        "fr": "Se connecter",
        "en": "Sign in",
    },
    "btn_sign_out": {
        "fr": "Déconnexion",
        "en": "Sign out",
    },
    "btn_save": {
        "fr": "Enregistrer",
        "en": "Save",
    },
    "btn_cancel": {
        "fr": "Annuler",
        "en": "Cancel",
    },
    "btn_edit": {
        "fr": "Modifier",
        "en": "Edit",
    },
    "btn_delete": {
        "fr": "Supprimer",
        "en": "Delete",
    },
    "btn_simulate": {
        "fr": "Lancer la simulation",
        "en": "Run simulation",
    },
    "btn_geocode": {
        "fr": "Localiser l'adresse",
        "en": "Locate address",
    },
    "label_email": {
        "fr": "Email",
        "en": "Email",
    },
    "label_password": {
        "fr": "Mot de passe",
        "en": "Password",
    },
    "label_search": {
        "fr": "Rechercher",
        "en": "Search",
    },
    "label_status": {
        "fr": "Statut",
        "en": "Status",
    },
    "all_statuses": {
        "fr": "Tous les statuts",
        "en": "All statuses",
    },
    "stat_projects": {
        "fr": "Projets totaux",
        "en": "Total projects",
    },
    "stat_clients": {
        "fr": "Prospects",
        "en": "Prospects",
    },
    "stat_production": {
        "fr": "Production totale (kWh/an)",
        "en": "Total production (kWh/yr)",
    },
    "stat_savings": {
        "fr": "Économies totales (/an)",
        "en": "Total savings (/yr)",
    },
    "stat_quotes": {
        "fr": "Devis",
        "en": "Quotes",
    },
    "stat_conversion": {
        "fr": "Taux de conversion",
        "en": "Conversion rate",
    },
    "empty_clients": {
        "fr": "Aucun prospect pour le moment.",
        "en": "No prospects yet.",
    },
    "empty_projects": {
        "fr": "Aucun projet trouvé.",
        "en": "No projects found.",
    },
    "confirm_delete_client": {
        "fr": "Êtes-vous sûr de vouloir supprimer le prospect {name} ? Cette action est irréversible et toutes les données associées seront définitivement perdues.",
        "en": "Delete prospect {name}? This cannot be undone and all related data will be lost.",
    },
    "confirm_delete_project": {
        "fr": "Êtes-vous sûr de vouloir supprimer le projet {name} ? Les devis associés seront également supprimés.",
        "en": "Delete project {name}? Its quotes will be deleted too.",
    },
    "error_unexpected": {
        "fr": "Une erreur inattendue est survenue",
        "en": "An unexpected error occurred",
    },
    "error_load": {
        "fr": "Erreur lors du chargement des données ({error})",
        "en": "Could not load data ({error})",
    },
    "error_not_found": {
        "fr": "Élément non trouvé",
        "en": "Not found",
    },
    "error_address": {
        "fr": "Adresse introuvable ({error})",
        "en": "Address not found ({error})",
    },
    "error_sign_in": {
        "fr": "Email ou mot de passe incorrect",
        "en": "Wrong email or password",
    },
    "error_network": {
        "fr": "Service injoignable, veuillez réessayer ({error})",
        "en": "Service unreachable, please try again ({error})",
    },
    "notice_saved": {
        "fr": "Modifications enregistrées",
        "en": "Changes saved",
    },
    "notice_created": {
        "fr": "Création réussie",
        "en": "Created",
    },
    "notice_deleted": {
        "fr": "Suppression effectuée",
        "en": "Deleted",
    },
    "notice_simulated": {
        "fr": "Simulation mise à jour",
        "en": "Simulation updated",
    },
    "date_missing": {
        "fr": "Date non disponible",
        "en": "Date unavailable",
    },
    # Project statuses
    "status_draft": {
        "fr": "Brouillon",
        "en": "Draft",
    },
    "status_pending": {
        "fr": "En attente",
        "en": "Pending",
    },
    "status_in_progress": {
        "fr": "En cours",
        "en": "In progress",
    },
    "status_completed": {
        "fr": "Terminé",
        "en": "Completed",
    },
    "status_cancelled": {
        "fr": "Annulé",
        "en": "Cancelled",
    },
    # Quote statuses (draft shared above)
    "status_sent": {
        "fr": "Envoyé",
        "en": "Sent",
    },
    "status_accepted": {
        "fr": "Accepté",
        "en": "Accepted",
    },
    "status_rejected": {
        "fr": "Refusé",
        "en": "Rejected",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'fr', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("fr") or key


def status_label(status: str, lang: str) -> str:
    """Display label for a project or quote status; unknown statuses pass through."""
    key = f"status_{status}"
    return t(key, lang) if key in _STRINGS else status
