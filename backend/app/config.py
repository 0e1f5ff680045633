"""
Configuration centrale de l'application via variables d'environnement.
Charger depuis un fichier .env en développement.
"""

from typing import List

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Base de données hébergée (API REST de requêtes)
    STORE_URL: str = Field(default="", validation_alias=AliasChoices("STORE_URL", "SUPABASE_URL"))
    STORE_KEY: str = Field(default="", validation_alias=AliasChoices("STORE_KEY", "SUPABASE_KEY"))

    # Vérification de connexion au démarrage (résultat uniquement journalisé)
    STORE_CHECK_ON_STARTUP: bool = True

    # CORS : tout autoriser par défaut
    CORS_ALLOW_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
