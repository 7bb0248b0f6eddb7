"""Name matching engine: rank a roster against a typed query"""
from typing import List, Optional, Sequence
import pandas as pd
from .scorer import Scorer
from ..data.models import MatchResult, RosterEntry
from ..utils.config import Config
from ..utils.text import is_blank

RANK_COLUMNS = ['rank', 'student_id', 'name', 'score']


def match_names(query: str, roster: Sequence[RosterEntry], scorer: Optional[Scorer] = None) -> List[MatchResult]:
    """
    Score every roster entry against a query and rank them.
    
    Args:
        query: Raw text typed by the user
        roster: Ordered roster entries
        scorer: Similarity scorer (default: Config.MATCH_METRIC)
        
    Returns:
        One MatchResult per entry, descending by score. On equal scores an
        exact (normalised) match goes first, otherwise roster order is
        kept. Blank query or empty roster gives an empty list.
    """
    if is_blank(query) or len(roster) == 0:
        return []
    
    scorer = scorer or Scorer()
    entries = list(roster)
    ranking = scorer.rank(query, [entry.name for entry in entries])
    
    return [
        MatchResult(entry=entries[i], score=score, rank=rank)
        for rank, (i, score) in enumerate(ranking)
    ]


class Matcher:
    def __init__(self, roster: Sequence[RosterEntry], scorer: Optional[Scorer] = None):
        self.roster = roster
        self.scorer = scorer or Scorer()
    
    def match(self, query: str) -> List[MatchResult]:
        """Full ranking of the roster for a query"""
        return match_names(query, self.roster, self.scorer)
    
    def top(self, query: str, k: Optional[int] = None, min_score: Optional[float] = None) -> List[MatchResult]:
        """
        Display subset of the ranking.
        
        Args:
            query: Raw text typed by the user
            k: Maximum number of results (default: Config.TOP_K)
            min_score: Drop results scoring below this (default: Config.MIN_SCORE)
            
        Returns:
            A prefix of match(query)
        """
        if k is None:
            k = Config.TOP_K
        if min_score is None:
            min_score = Config.MIN_SCORE
        
        results = []
        for result in self.match(query):
            if len(results) >= k or result.score < min_score:
                break
            results.append(result)
        return results
    
    def best(self, query: str) -> Optional[MatchResult]:
        """Highest ranked entry, or None when nothing can be ranked"""
        results = self.match(query)
        return results[0] if results else None
    
    def rank_frame(self, query: str) -> pd.DataFrame:
        """Ranking as a DataFrame, one row per roster entry"""
        results = self.match(query)
        if not results:
            return pd.DataFrame(columns=RANK_COLUMNS)
        return pd.DataFrame([result.to_dict() for result in results], columns=RANK_COLUMNS)
