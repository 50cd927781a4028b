movie_genres = {
    28: "Action",
    12: "Adventure",
    16: "Animation",
    35: "Comedy",
    80: "Crime",
    99: "Documentary",
    18: "Drama",
    10751: "Family",
    14: "Fantasy",
    36: "History",
    27: "Horror",
    10402: "Music",
    9648: "Mystery",
    10749: "Romance",
    878: "Science Fiction",
    10770: "TV Movie",
    53: "Thriller",
    10752: "War",
    37: "Western",
}

_genre_ids_by_name = {name.lower(): gid for gid, name in movie_genres.items()}


def resolve_genre(value: str) -> str | None:
    """
    Resolve a genre query value to a TMDB `with_genres` filter.

    Accepts numeric ids (including `|` or `,` separated lists, passed through unchanged)
    and English genre names. Returns None for unknown names.
    """
    value = value.strip()
    if not value:
        return None
    if all(part.strip().isdigit() for part in value.replace("|", ",").split(",")):
        return value
    gid = _genre_ids_by_name.get(value.lower())
    return str(gid) if gid is not None else None
