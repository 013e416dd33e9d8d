from .idea import IdeaStatus, IdeaRecord, IdeaScoreUpdate
from .hypothesis import HypothesisStatus, HypothesisRecord, STATUS_LABELS

__all__ = [
	"IdeaStatus",
	"IdeaRecord",
	"IdeaScoreUpdate",
	"HypothesisStatus",
	"HypothesisRecord",
	"STATUS_LABELS",
]
