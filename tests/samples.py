"""Minimal provider payloads shaped like the real APIs."""

SEATTLE_GEOCODE = [
    {
        "place_id": "235549103",
        "display_name": "Seattle, King County, Washington, USA",
        "lat": "47.6038321",
        "lon": "-122.3300624",
    }
]

WEATHER_BODY = {
    "city_name": "Seattle",
    "data": [
        {"datetime": "2023-04-01", "weather": {"icon": "c04d", "code": 804, "description": "Overcast clouds"}},
        {"datetime": "2023-04-02", "weather": {"icon": "r01d", "code": 500, "description": "Light rain"}},
    ],
}

YELP_BODY = {
    "businesses": [
        {
            "name": "Pike Place Chowder",
            "image_url": "https://s3-media1.fl.yelpcdn.com/bphoto/ijju-wYoRAxWjHPTCxyQGQ/o.jpg",
            "price": "$$",
            "rating": 4.5,
            "url": "https://www.yelp.com/biz/pike-place-chowder-seattle",
        }
    ],
    "total": 1,
}

MOVIES_BODY = {
    "page": 1,
    "results": [
        {
            "title": "Sleepless in Seattle",
            "overview": "A young boy who tries to set his dad up on a date.",
            "vote_average": 6.6,
            "vote_count": 1527,
            "poster_path": "/abc.jpg",
            "popularity": 12.5,
            "release_date": "1993-06-24",
        }
    ],
}

TRAILS_BODY = {
    "trails": [
        {
            "name": "Rattlesnake Ledge",
            "location": "North Bend, Washington",
            "length": 5.3,
            "stars": 4.4,
            "starVotes": 82,
            "summary": "An extremely popular out-and-back hike to the viewpoint on Rattlesnake Ledge.",
            "url": "https://www.hikingproject.com/trail/7021679/rattlesnake-ledge",
            "conditionDetails": "Dry",
            "conditionDate": "2023-04-01T15:30:00Z",
        }
    ],
    "success": 1,
}
