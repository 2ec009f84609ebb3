# Servicios del núcleo
from core.services.abstraction import abstract, deduplicate
from core.services.classifier import classify
from core.services.masking import mask_value
from core.services.budget import Budget
from core.services.column_analyzer import ColumnAnalyzer
from core.services.scan_orchestrator import ScanOrchestrator, apply_address_suppression

__all__ = [
    "abstract",
    "deduplicate",
    "classify",
    "mask_value",
    "Budget",
    "ColumnAnalyzer",
    "ScanOrchestrator",
    "apply_address_suppression",
]
