"""Constants and configuration values for RedditPulse."""

# Standard English stopword list (NLTK "english" corpus)
STOPWORDS = frozenset({
    'i', 'me', 'my', 'myself', 'we', 'our', 'ours', 'ourselves', 'you',
    "you're", "you've", "you'll", "you'd", 'your', 'yours', 'yourself',
    'yourselves', 'he', 'him', 'his', 'himself', 'she', "she's", 'her',
    'hers', 'herself', 'it', "it's", 'its', 'itself', 'they', 'them',
    'their', 'theirs', 'themselves', 'what', 'which', 'who', 'whom',
    'this', 'that', "that'll", 'these', 'those', 'am', 'is', 'are',
    'was', 'were', 'be', 'been', 'being', 'have', 'has', 'had', 'having',
    'do', 'does', 'did', 'doing', 'a', 'an', 'the', 'and', 'but', 'if',
    'or', 'because', 'as', 'until', 'while', 'of', 'at', 'by', 'for',
    'with', 'about', 'against', 'between', 'into', 'through', 'during',
    'before', 'after', 'above', 'below', 'to', 'from', 'up', 'down', 'in',
    'out', 'on', 'off', 'over', 'under', 'again', 'further', 'then', 'once',
    'here', 'there', 'when', 'where', 'why', 'how', 'all', 'any', 'both',
    'each', 'few', 'more', 'most', 'other', 'some', 'such', 'no', 'nor',
    'not', 'only', 'own', 'same', 'so', 'than', 'too', 'very', 's', 't',
    'can', 'will', 'just', 'don', "don't", 'should', "should've", 'now',
    'd', 'll', 'm', 'o', 're', 've', 'y', 'ain', 'aren', "aren't",
    'couldn', "couldn't", 'didn', "didn't", 'doesn', "doesn't", 'hadn',
    "hadn't", 'hasn', "hasn't", 'haven', "haven't", 'isn', "isn't", 'ma',
    'mightn', "mightn't", 'mustn', "mustn't", 'needn', "needn't", 'shan',
    "shan't", 'shouldn', "shouldn't", 'wasn', "wasn't", 'weren', "weren't",
    'won', "won't", 'wouldn', "wouldn't",
})

# Contraction leftovers and filler that survive punctuation stripping
EXTRA_STOPWORDS = frozenset({
    "dont", "im", "thats", "hes", "shes", "theyre", "also", "just", "will",
    "can", "one", "now", "get", "even", "like", "cant", "ive", "youre",
    "doesnt", "didnt", "isnt", "wont", "arent", "wasnt", "theres", "whats",
})

ALL_STOPWORDS = STOPWORDS | EXTRA_STOPWORDS


class FetchConstants:
    """Constants related to Reddit listings."""

    SORT_ORDERS = ("hot", "new", "top", "rising", "controversial")
    PERIODS = ("hour", "day", "week", "month", "year", "all")
    # Listings that accept a time_filter argument
    TIME_FILTERED_SORTS = ("top", "controversial")

    SKIPPED_BODIES = ("[deleted]", "[removed]")


class AnalysisConstants:
    """Constants for the analysis passes."""

    MIN_TOKEN_LENGTH = 3  # tokens of length <= 2 are dropped
    DEFAULT_TOP_WORDS = 10
    DEFAULT_TOP_COMMENTS = 5
    MISSING_LABEL = "N/A"


class UIConstants:
    """Streamlit page limits and copy."""

    MIN_THREADS_UI = 1
    MAX_THREADS_UI = 50
    MAX_COMMENT_PREVIEW = 300  # chars shown per top comment

    DEFAULT_LEADERS = "Trump, Kamala"
    DEFAULT_COUNTRIES = "Iran, China, Russia, Ukraine, Israel"

    SENTIMENT_LEGEND = (
        "Sentiment scale: -1 = very negative, 0 = neutral, +1 = very positive. "
        "Scores are the mean VADER compound score of comments mentioning each name."
    )
    NOT_ENOUGH_LEADERS = "Not enough leaders to compare. Enter at least two leader names."


class FileConstants:
    """Constants for file operations."""

    EXPORT_PREFIX = "entity_sentiment"
    EXPORT_COLUMNS = ("Entity", "Average_Sentiment")
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
