"""Fixed word lists used by the lexicon-based analytics."""

POSITIVE_WORDS = frozenset([
    "good", "great", "excellent", "amazing", "wonderful", "fantastic", "love",
    "like", "happy", "joy", "success", "win", "best", "perfect", "beautiful",
    "awesome", "brilliant", "outstanding", "superb", "terrific",
])

NEGATIVE_WORDS = frozenset([
    "bad", "terrible", "awful", "horrible", "hate", "dislike", "sad", "angry",
    "frustrated", "disappointed", "worst", "fail", "failure", "ugly",
    "dreadful", "miserable",
])

STOP_WORDS = frozenset([
    "the", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with",
    "by", "is", "are", "was", "were", "be", "been", "have", "has", "had", "do",
    "does", "did", "will", "would", "could", "should", "may", "might", "can",
    "this", "that", "these", "those", "a", "an", "as", "from", "it", "its",
    "if", "then", "else", "when", "where", "why", "how", "all", "any", "both",
    "each", "few", "more", "most", "other", "some", "such", "no", "nor", "not",
    "only", "own", "same", "so", "than", "too", "very", "you", "your", "yours",
    "yourself", "yourselves", "i", "me", "my", "myself", "we", "our", "ours",
    "ourselves", "what", "which", "who", "whom", "whose", "he", "him", "his",
    "himself", "she", "her", "hers", "herself", "itself", "they", "them",
    "their", "theirs", "themselves",
])
