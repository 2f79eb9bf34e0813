"""Domain models for the venue feed."""

from .models import CandidateProfile, PartnerPreference, Sex, ViewerProfile

__all__ = ["ViewerProfile", "CandidateProfile", "Sex", "PartnerPreference"]
