"""Tests for raw provider record → canonical record mapping."""

from city_explorer.services.normalizers import (
    TMDB_IMAGE_BASE,
    date_string,
    geocode_fields,
    normalize_business,
    normalize_meetup,
    normalize_movie,
    normalize_trail,
    normalize_weather,
)


class TestDateString:
    def test_unix_seconds_to_date_only(self):
        assert date_string(1540425600) == "Thu Oct 25 2018"

    def test_time_of_day_is_dropped(self):
        # 07:00 UTC on the same day
        assert date_string(1540450800) == "Thu Oct 25 2018"


class TestGeocodeFields:
    def test_first_result_mapping(self, seattle_geocode):
        fields = geocode_fields("98101", seattle_geocode["results"][0])
        assert fields == {
            "search_query": "98101",
            "formatted_query": "Seattle, WA 98101, USA",
            "latitude": 47.6062,
            "longitude": -122.3321,
        }

    def test_search_query_kept_verbatim(self, seattle_geocode):
        fields = geocode_fields("  Seattle ", seattle_geocode["results"][0])
        assert fields["search_query"] == "  Seattle "


class TestWeather:
    def test_normalize(self, sample_darksky_days):
        record = normalize_weather(sample_darksky_days[0])
        assert record.forecast == "Rain in the morning."
        assert record.time == "Thu Oct 25 2018"

    def test_missing_summary(self):
        record = normalize_weather({"time": 1540512000})
        assert record.forecast is None
        assert record.time == "Fri Oct 26 2018"


class TestBusiness:
    def test_normalize(self, sample_yelp_businesses):
        record = normalize_business(sample_yelp_businesses[0])
        assert record.name == "Pike Place Chowder"
        assert record.rating == 4.5
        assert record.price == "$$"
        assert record.url.endswith("pike-place-chowder-seattle")

    def test_price_optional(self, sample_yelp_businesses):
        assert normalize_business(sample_yelp_businesses[1]).price is None


class TestMovie:
    def test_normalize(self, sample_tmdb_results):
        record = normalize_movie(sample_tmdb_results[0])
        assert record.title == "Sleepless in Seattle"
        assert record.average_votes == 6.6
        assert record.total_votes == 1740
        assert record.released_on == "1993-06-24"
        assert record.image_url == TMDB_IMAGE_BASE + "afkYP15OeUOD0tFEmj6VvejuOcz.jpg"

    def test_absolute_image_url_has_single_slash(self, sample_tmdb_results):
        record = normalize_movie(sample_tmdb_results[0])
        assert "bestv2//" not in record.image_url

    def test_no_poster_no_release(self, sample_tmdb_results):
        record = normalize_movie(sample_tmdb_results[1])
        assert record.image_url is None
        assert record.released_on is None


class TestMeetup:
    def test_normalize(self, sample_meetup_events):
        record = normalize_meetup(sample_meetup_events[0])
        assert record.name == "Python Project Night"
        assert record.link.startswith("https://www.meetup.com/seattle-python/")
        assert record.creation_date == "Thu Oct 25 2018"
        assert record.host == "Seattle Python Meetup"

    def test_flat_host_and_link(self):
        record = normalize_meetup({"name": "Hack Night", "link": "https://example.org/e/1", "host": "Ada"})
        assert record.host == "Ada"
        assert record.link == "https://example.org/e/1"
        assert record.creation_date is None

    def test_created_in_milliseconds(self):
        record = normalize_meetup({"name": "Python Night", "created": 1540425600000})
        assert record.creation_date == "Thu Oct 25 2018"

    def test_unusable_created(self):
        assert normalize_meetup({"name": "Python Night", "created": "yesterday"}).creation_date is None
        assert normalize_meetup({"name": "Python Night", "created": 1e30}).creation_date is None


class TestTrail:
    def test_normalize(self, sample_trails):
        record = normalize_trail(sample_trails[0])
        assert record.name == "Discovery Park Loop Trail"
        assert record.star_votes == 58
        assert record.trail_url.endswith("discovery-park-loop-trail")
        assert record.conditions == "All Clear"
        assert record.condition_date == "2018-10-20"

    def test_unreported_condition_date(self, sample_trails):
        assert normalize_trail(sample_trails[1]).condition_date is None
