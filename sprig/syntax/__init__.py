from sprig.syntax.analyzer import analyze, analyze_all

__all__ = ["analyze", "analyze_all"]
