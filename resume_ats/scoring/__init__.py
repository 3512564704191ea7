from .ats import build_suggestions, format_score, keyword_match, profile_text, score_profile

__all__ = ["score_profile", "keyword_match", "format_score", "build_suggestions", "profile_text"]
