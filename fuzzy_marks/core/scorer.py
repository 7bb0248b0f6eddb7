"""Similarity scoring between a typed query and a roster name"""
import math
from collections import Counter
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple
from rapidfuzz import fuzz
from rapidfuzz.distance import JaroWinkler, Levenshtein
from ..utils.config import Config
from ..utils.text import normalize_name


def ngram_features(text: str, ngram_max: int = 2) -> Dict[str, float]:
    """
    Bag of character n-grams (n = 1..ngram_max), L2-normalised.
    
    Args:
        text: Already normalised string
        ngram_max: Longest n-gram to count
        
    Returns:
        Mapping of n-gram to weight; empty for an empty string
    """
    counts = Counter()
    for n in range(1, ngram_max + 1):
        if n > len(text):
            break
        for i in range(len(text) - n + 1):
            counts[text[i:i + n]] += 1
    
    norm = math.sqrt(sum(v * v for v in counts.values()))
    if norm == 0:
        return {}
    return {gram: count / norm for gram, count in counts.items()}


def cosine(fs: Dict[str, float], ft: Dict[str, float]) -> float:
    """Dot product of two normalised feature bags"""
    if len(fs) > len(ft):
        fs, ft = ft, fs
    return sum(weight * ft[gram] for gram, weight in fs.items() if gram in ft)


def _levenshtein(s: str, t: str) -> float:
    return Levenshtein.normalized_similarity(s, t)


def _jaro_winkler(s: str, t: str) -> float:
    return JaroWinkler.normalized_similarity(s, t)


def _token_sort(s: str, t: str) -> float:
    return fuzz.token_sort_ratio(s, t) / 100.0


# rapidfuzz-backed metrics, all returning [0, 1]
RAPIDFUZZ_METRICS: Dict[str, Callable[[str, str], float]] = {
    'levenshtein': _levenshtein,
    'jaro_winkler': _jaro_winkler,
    'token_sort': _token_sort
}

METRICS = ['ngram'] + list(RAPIDFUZZ_METRICS)


class Scorer:
    def __init__(self, metric: Optional[str] = None, ngram_max: Optional[int] = None):
        self.metric = (metric or Config.MATCH_METRIC).lower()
        self.ngram_max = ngram_max if ngram_max is not None else Config.NGRAM_MAX
        
        if self.metric not in METRICS:
            raise ValueError(f"Unknown match metric: {self.metric} (expected one of {', '.join(METRICS)})")
        if self.ngram_max < 1:
            raise ValueError(f"NGRAM_MAX must be at least 1, got {self.ngram_max}")
    
    def score(self, query: str, name: str) -> float:
        """
        Similarity of a query to a roster name in [0, 1].
        
        Both strings are lowercased and whitespace-normalised first. Equal
        non-empty strings score exactly 1.0, an empty side scores 0.0.
        """
        s = normalize_name(query)
        t = normalize_name(name)
        return self._score_normalized(s, t, ngram_features(s, self.ngram_max) if self.metric == 'ngram' else None)
    
    def score_all(self, query: str, names: Iterable[str]) -> List[float]:
        """Score one query against many names, computing the query features once"""
        s = normalize_name(query)
        fs = ngram_features(s, self.ngram_max) if self.metric == 'ngram' else None
        return [self._score_normalized(s, normalize_name(name), fs) for name in names]
    
    def rank(self, query: str, names: Sequence[str]) -> List[Tuple[int, float]]:
        """
        Positions of names ordered best match first, with their scores.

        Higher scores come first. On equal scores a name equal to the query
        after normalisation goes first, then the original order is kept.
        """
        s = normalize_name(query)
        scores = self.score_all(query, names)
        exact = [normalize_name(name) == s for name in names]
        order = sorted(range(len(names)), key=lambda i: (-scores[i], not exact[i], i))
        return [(i, scores[i]) for i in order]

    def _score_normalized(self, s: str, t: str, fs: Optional[Dict[str, float]]) -> float:
        if not s or not t:
            return 0.0
        if s == t:
            return 1.0
        
        if self.metric == 'ngram':
            value = cosine(fs, ngram_features(t, self.ngram_max))
        else:
            value = RAPIDFUZZ_METRICS[self.metric](s, t)
        
        # Float noise can push a near-identical cosine just past 1.0
        return min(1.0, max(0.0, value))
