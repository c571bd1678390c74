from resume_review.analysis.analyzer import Analyzer
from resume_review.analysis.base import BaseAnalyzer
from resume_review.analysis.factory import AnalyzerFactory
from resume_review.analysis.models import AnalysisResult

__all__ = ["AnalysisResult", "Analyzer", "AnalyzerFactory", "BaseAnalyzer"]
