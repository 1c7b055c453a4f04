"""Evaluation pipeline running configured functions over inputs."""
from .evaluator import EvaluationReport, Evaluator

__all__ = ["EvaluationReport", "Evaluator"]
