"""Data preparation for export."""

import datetime
import json
import os
from typing import Dict, Any, List, Optional

import pandas as pd

from ..core.constants import FileConstants
from ..core.models import AnalysisResult, RawComment, SentimentResult


def build_export_table(results: List[SentimentResult]) -> pd.DataFrame:
    """One row per entity with columns Entity, Average_Sentiment; missing averages stay empty."""
    entity_col, sentiment_col = FileConstants.EXPORT_COLUMNS
    return pd.DataFrame(
        {
            entity_col: [r.entity for r in results],
            sentiment_col: pd.Series([r.average_sentiment for r in results], dtype="float64"),
        },
        columns=list(FileConstants.EXPORT_COLUMNS),
    )


def export_filename(today: Optional[datetime.date] = None, extension: str = "csv") -> str:
    today = today or datetime.date.today()
    return f"{FileConstants.EXPORT_PREFIX}_{today.isoformat()}.{extension}"


def to_csv_bytes(table: pd.DataFrame) -> bytes:
    return table.to_csv(index=False).encode("utf-8")


def export_to_csv(result: AnalysisResult, directory: str = ".") -> str:
    """Write the entity table to a dated CSV file in ``directory`` and return its path."""
    path = os.path.join(directory, export_filename())
    build_export_table(result.entity_results).to_csv(path, index=False)
    return path


def _comment_dict(comment: RawComment, score: float) -> Dict[str, Any]:
    return {
        "id": comment.id,
        "author": comment.author,
        "text": comment.text,
        "upvotes": comment.score,
        "thread_url": comment.thread_url,
        "sentiment": score,
    }


def prepare_export(result: AnalysisResult) -> Dict[str, Any]:
    """Prepare data for JSON export."""
    request = result.request
    top = result.top_comments

    export_data = {
        "request": {
            "channel": request.channel,
            "sort": request.sort,
            "period": request.period,
            "max_threads": request.max_threads,
            "leaders": list(request.leaders),
            "countries": list(request.countries),
        },
        "summary": result.summary,
        "total_comments": result.comment_count,
        "entities": [
            {
                "entity": r.entity,
                "kind": r.kind,
                "average_sentiment": r.average_sentiment,
                "mentions": r.mentions,
            }
            for r in result.entity_results
        ],
        "top_words": [{"word": w.word, "count": w.count} for w in result.word_frequencies],
        "top_positive": [_comment_dict(c, s) for c, s in zip(top.positive, top.positive_scores)],
        "top_negative": [_comment_dict(c, s) for c, s in zip(top.negative, top.negative_scores)],
        "metadata": {
            "export_timestamp": None,  # Will be set by caller
            "version": "0.1.0"
        }
    }

    return export_data


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    # Add timestamp
    data.setdefault("metadata", {})["export_timestamp"] = datetime.datetime.now().isoformat()

    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
