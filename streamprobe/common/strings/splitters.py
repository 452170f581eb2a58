from typing import List

def csv_to_list(v: str | List[str] | None) -> List[str]:
    """
    Normalize a comma-separated setting (e.g. API__CORS_ALLOW_ORIGINS="http://a, http://b")
    or an already split list into trimmed, non-empty items.
    Repeats are dropped, first occurrence keeps its position.
    """
    if v is None:
        return []
    if isinstance(v, (list, tuple)):
        items = [str(s).strip() for s in v if s and str(s).strip()]
    else:
        items = [s.strip() for s in str(v).split(",") if s.strip()]
    return list(dict.fromkeys(items))
