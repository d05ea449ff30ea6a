"""
Mock TMDB API responses for testing.

Realistic bodies for the search endpoints and the error envelope
({status_code, status_message}). Used with respx to mock httpx calls.
"""

# GET /search/movie?query=Inception&year=2010
TMDB_MOVIE_SEARCH_RESPONSE = {
    "page": 1,
    "results": [
        {
            "adult": False,
            "backdrop_path": "/8ZTVqvKDQ8emSGUEMjsS4yHAwrp.jpg",
            "genre_ids": [28, 878, 12],
            "id": 27205,
            "original_language": "en",
            "original_title": "Inception",
            "overview": "Cobb, a skilled thief who commits corporate espionage...",
            "popularity": 83.952,
            "poster_path": "/oYuLEt3zVCKq57qu2F8dT7NIa6f.jpg",
            "release_date": "2010-07-15",
            "title": "Inception",
            "video": False,
            "vote_average": 8.4,
            "vote_count": 35000,
        },
        {
            "adult": False,
            "backdrop_path": None,
            "genre_ids": [99],
            "id": 64956,
            "original_language": "en",
            "original_title": "Inception: The Cobol Job",
            "overview": "",
            "popularity": 3.1,
            "poster_path": None,
            "release_date": "2010-12-07",
            "title": "Inception: The Cobol Job",
            "video": False,
            "vote_average": 7.2,
            "vote_count": 420,
        },
    ],
    "total_pages": 1,
    "total_results": 2,
}

# GET /search/tv?query=The+Office
TMDB_TV_SEARCH_RESPONSE = {
    "page": 1,
    "results": [
        {
            "adult": False,
            "backdrop_path": "/mLyW3UTgi2lsMdtueYODcfAB9Ku.jpg",
            "first_air_date": "2005-03-24",
            "genre_ids": [35],
            "id": 2316,
            "name": "The Office",
            "origin_country": ["US"],
            "original_language": "en",
            "original_name": "The Office",
            "overview": "The everyday lives of office employees...",
            "popularity": 215.3,
            "poster_path": "/qWnJzyZhyy74gjpSjIXWmuk0ifX.jpg",
            "vote_average": 8.6,
            "vote_count": 4200,
        }
    ],
    "total_pages": 1,
    "total_results": 1,
}

TMDB_SEARCH_EMPTY_RESPONSE = {
    "page": 1,
    "results": [],
    "total_pages": 0,
    "total_results": 0,
}

# Results without id are dropped by the client
TMDB_SEARCH_WITH_INVALID_ITEM = {
    "page": 1,
    "results": [
        {"title": "No id here"},
        {"id": "tt0133093", "title": "Malformed id"},
        {"id": None, "title": "Null id"},
        {"id": 603, "title": "The Matrix", "release_date": "1999-03-30"},
    ],
    "total_pages": 1,
    "total_results": 4,
}

# 401 Unauthorized
TMDB_INVALID_KEY_RESPONSE = {
    "success": False,
    "status_code": 7,
    "status_message": "Invalid API key: You must be granted a valid key.",
}

# 429 Too Many Requests
TMDB_RATE_LIMIT_RESPONSE = {
    "success": False,
    "status_code": 25,
    "status_message": "Your request count (41) is over the allowed limit of 40.",
}
