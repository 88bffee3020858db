# ───────────────────────────────────────────────────────────────
# Imports del ADK
# ───────────────────────────────────────────────────────────────
from google.adk.agents import LlmAgent
from google.genai import types

#───────────────────────────────────────────────────────────────
# Importar herramientas y prompts
# ───────────────────────────────────────────────────────────────
from .tools.tool_best_day import best_day_insights
from .tools.sheets.config import AppConfig
from . import prompt_best_day

#───────────────────────────────────────────────────────────────
# Configuración del modelo (lee .env vía config)
# ───────────────────────────────────────────────────────────────
_cfg = AppConfig()
Model = _cfg.model
temperature = _cfg.temperature

#───────────────────────────────────────────────────────────────
# Definición del agente raíz
# ───────────────────────────────────────────────────────────────
root_agent = LlmAgent (
    name="agent_best_day",
    model=Model,
    description="Agente que lee órdenes y line items de una hoja de Google Sheets y encuentra el mejor día para reembolsar.",
    instruction=prompt_best_day.instrucciones_best_day,

    generate_content_config=types.GenerateContentConfig
    (
        temperature=temperature,
    ),

    tools=
    [
        best_day_insights,
    ],
)
