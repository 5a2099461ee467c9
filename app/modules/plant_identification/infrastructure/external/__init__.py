from .gemini_client import GeminiPlantAnalyzer, extract_json_payload

__all__ = ["GeminiPlantAnalyzer", "extract_json_payload"]
