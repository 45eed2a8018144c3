"""Public datasets shipped with sqlquest."""

from __future__ import annotations

from typing import Any, Dict, List

BUILTIN_DATASETS: List[Dict[str, Any]] = [
    {
        "id": "nyc-taxi",
        "name": "NYC Taxi Trips",
        "description": "Data on millions of taxi trips in New York City, including fares, locations, and timestamps.",
        "tables": [
            {
                "name": "trips",
                "columns": [
                    {"name": "pickup_datetime", "type": "TIMESTAMP"},
                    {"name": "dropoff_datetime", "type": "TIMESTAMP"},
                    {"name": "passenger_count", "type": "INTEGER"},
                    {"name": "trip_distance", "type": "FLOAT"},
                    {"name": "fare_amount", "type": "FLOAT"},
                    {"name": "payment_type", "type": "STRING"},
                ],
            },
            {
                "name": "zones",
                "columns": [
                    {"name": "zone_id", "type": "INTEGER"},
                    {"name": "zone_name", "type": "STRING"},
                    {"name": "borough", "type": "STRING"},
                ],
            },
        ],
    },
    {
        "id": "google_trends",
        "name": "Google Trends",
        "description": "Search interest data for various terms over time.",
        "tables": [
            {
                "name": "international_top_terms",
                "columns": [
                    {"name": "term", "type": "STRING"},
                    {"name": "country_name", "type": "STRING"},
                    {"name": "week", "type": "DATE"},
                    {"name": "score", "type": "INTEGER"},
                    {"name": "rank", "type": "INTEGER"},
                ],
            }
        ],
    },
    {
        "id": "github_repos",
        "name": "GitHub Public Data",
        "description": "Commits, languages, and licenses from public repositories.",
        "tables": [
            {
                "name": "commits",
                "columns": [
                    {"name": "commit", "type": "STRING"},
                    {"name": "author", "type": "STRING"},
                    {"name": "message", "type": "STRING"},
                    {"name": "repo_name", "type": "STRING"},
                ],
            },
            {
                "name": "languages",
                "columns": [
                    {"name": "repo_name", "type": "STRING"},
                    {"name": "language", "type": "STRING"},
                    {"name": "bytes", "type": "INTEGER"},
                ],
            },
        ],
    },
    {
        "id": "stackoverflow",
        "name": "Stack Overflow",
        "description": "Questions, answers, and user data from the world's largest developer community.",
        "tables": [
            {
                "name": "users",
                "columns": [
                    {"name": "id", "type": "INTEGER"},
                    {"name": "display_name", "type": "STRING"},
                    {"name": "reputation", "type": "INTEGER"},
                    {"name": "creation_date", "type": "TIMESTAMP"},
                    {"name": "location", "type": "STRING"},
                ],
            },
            {
                "name": "posts_questions",
                "columns": [
                    {"name": "id", "type": "INTEGER"},
                    {"name": "title", "type": "STRING"},
                    {"name": "body", "type": "STRING"},
                    {"name": "owner_user_id", "type": "INTEGER"},
                    {"name": "score", "type": "INTEGER"},
                    {"name": "tags", "type": "STRING"},
                ],
            },
        ],
    },
    {
        "id": "austin_bikeshare",
        "name": "Austin Bike Share",
        "description": "Austin B-Cycle trips and station statuses.",
        "tables": [
            {
                "name": "trips",
                "columns": [
                    {"name": "trip_id", "type": "INTEGER"},
                    {"name": "subscriber_type", "type": "STRING"},
                    {"name": "start_station_name", "type": "STRING"},
                    {"name": "end_station_name", "type": "STRING"},
                    {"name": "duration_minutes", "type": "INTEGER"},
                    {"name": "start_time", "type": "TIMESTAMP"},
                ],
            },
            {
                "name": "stations",
                "columns": [
                    {"name": "station_id", "type": "INTEGER"},
                    {"name": "name", "type": "STRING"},
                    {"name": "status", "type": "STRING"},
                    {"name": "location", "type": "GEOGRAPHY"},
                ],
            },
        ],
    },
    {
        "id": "hacker_news",
        "name": "Hacker News",
        "description": "Stories and comments from Y Combinator's Hacker News.",
        "tables": [
            {
                "name": "stories",
                "columns": [
                    {"name": "id", "type": "INTEGER"},
                    {"name": "title", "type": "STRING"},
                    {"name": "url", "type": "STRING"},
                    {"name": "score", "type": "INTEGER"},
                    {"name": "time", "type": "TIMESTAMP"},
                    {"name": "by", "type": "STRING"},
                ],
            },
            {
                "name": "comments",
                "columns": [
                    {"name": "id", "type": "INTEGER"},
                    {"name": "text", "type": "STRING"},
                    {"name": "parent", "type": "INTEGER"},
                    {"name": "time", "type": "TIMESTAMP"},
                    {"name": "by", "type": "STRING"},
                ],
            },
        ],
    },
]
