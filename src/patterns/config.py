"""
Configuração dos exemplos de padrões GoF
"""
import os
from dotenv import load_dotenv

load_dotenv()

# Conexão simulada do Singleton (nunca é aberta de verdade)
DATABASE_URL = os.getenv(
    "DATABASE_URL",
    "sqlite:///./cafeteria.db"
)

# Sentinelas iniciais do StatisticsDisplay
STATISTICS_MAX_SENTINEL = float(os.getenv("STATISTICS_MAX_SENTINEL", "0.0"))
STATISTICS_MIN_SENTINEL = float(os.getenv("STATISTICS_MIN_SENTINEL", "200.0"))
