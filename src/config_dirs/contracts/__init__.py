from .probe import CandidateProbe, CandidateSource

__all__ = [
    "CandidateProbe",
    "CandidateSource",
]
