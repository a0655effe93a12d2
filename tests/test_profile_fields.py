"""
Tests for assembling profile update fields.

Tests:
- Skills splitting
- Website and social link normalization
- Allow-listed pass-through fields
"""

import pytest

from devconnector.schemas.pydantic import ProfileUpdate
from devconnector.services.exceptions import MalformedURLError
from devconnector.services.profile_service import build_profile_fields, split_skills


class TestSplitSkills:
    """Tests for split_skills."""

    def test_list_kept_as_is(self):
        skills = ["Python", " FastAPI "]
        assert split_skills(skills) == skills

    def test_string_split_and_trimmed(self):
        assert split_skills("Python, FastAPI ,MongoDB") == ["Python", "FastAPI", "MongoDB"]

    def test_no_leading_space_artifact(self):
        assert all(not skill.startswith(" ") for skill in split_skills("a, b, c"))

    @pytest.mark.parametrize("raw", ["one", "a,b", " a , b , c ", "x,,y", "html, css, js, react, node"])
    def test_length_matches_segment_count(self, raw):
        segments = raw.split(",")
        result = split_skills(raw)
        assert len(result) == len(segments)
        assert result == [segment.strip() for segment in segments]


class TestBuildProfileFields:
    """Tests for build_profile_fields."""

    def test_website_normalized_with_https(self):
        update = ProfileUpdate(status="Developer", skills="python", website="example.com")
        assert build_profile_fields(update)["website"] == "https://example.com"

    def test_missing_website_is_empty_string(self):
        update = ProfileUpdate(status="Developer", skills="python")
        assert build_profile_fields(update)["website"] == ""

    def test_social_links_normalized(self):
        update = ProfileUpdate(
            status="Developer",
            skills="python",
            twitter="twitter.com/jane",
            linkedin="http://www.linkedin.com/in/jane/",
        )
        social = build_profile_fields(update)["social"]
        assert social["twitter"] == "https://twitter.com/jane"
        assert social["linkedin"] == "https://linkedin.com/in/jane"

    def test_empty_social_link_stays_unset(self):
        update = ProfileUpdate(status="Developer", skills="python", twitter="")
        social = build_profile_fields(update)["social"]
        assert social["twitter"] is None
        assert set(social) == {"youtube", "twitter", "instagram", "linkedin", "facebook"}

    def test_pass_through_only_when_sent(self):
        update = ProfileUpdate(status="Developer", skills="python", company="Acme")
        fields = build_profile_fields(update)
        assert fields["company"] == "Acme"
        assert fields["status"] == "Developer"
        assert "bio" not in fields
        assert "location" not in fields

    def test_unknown_fields_dropped(self):
        update = ProfileUpdate.model_validate(
            {"status": "Developer", "skills": "python", "isAdmin": True, "experience": []}
        )
        fields = build_profile_fields(update)
        assert "isAdmin" not in fields
        assert "experience" not in fields

    def test_malformed_website_raises(self):
        update = ProfileUpdate(status="Developer", skills="python", website="http://")
        with pytest.raises(MalformedURLError) as exc_info:
            build_profile_fields(update)
        assert exc_info.value.field == "website"
