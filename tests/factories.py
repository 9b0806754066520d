from feedbrain.models.content import CandidateItem


def make_item(item_id: str = "v1", **overrides) -> CandidateItem:
    data = {
        "id": item_id,
        "title": "Python Machine Learning Tutorial",
        "channel_id": "chan-1",
        "channel_name": "Code Academy",
        "duration": 600,
        "view_count": 1000,
        "upload_date": "3 days ago",
    }
    data.update(overrides)
    return CandidateItem(**data)
