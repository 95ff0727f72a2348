import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Storage sizes
    max_party_size: int = int(os.getenv("MAX_PARTY_SIZE", "6"))
    max_box_size: int = int(os.getenv("MAX_BOX_SIZE", "30"))

    # PokeAPI Settings
    pokeapi_url: str = os.getenv("POKEAPI_URL", "https://pokeapi.co/api/v2")
    pokeapi_timeout: float = float(os.getenv("POKEAPI_TIMEOUT", "30"))


settings = Settings()
