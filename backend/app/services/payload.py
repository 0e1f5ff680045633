"""
Extraction des champs d'un corps de requête JSON, sans validation.
"""

from typing import Any, Dict, Iterable


def pick_fields(body: Any, fields: Iterable[str]) -> Dict[str, Any]:
    """
    Retourne {champ: valeur} pour chaque champ attendu, valeurs transmises telles quelles.
    Un champ absent, ou un corps qui n'est pas un objet JSON, donne None.
    """
    if not isinstance(body, dict):
        body = {}
    return {field: body.get(field) for field in fields}
