"""Tests for the profile completion calculator"""
import pytest

from profile_builder.app.db.storage import ProfileStorage
from profile_builder.app.services.completion import calculate_completion, percentage
from profile_builder.app.services.profile_service import ProfileService


def _complete(storage, profile_id=1):
    return ProfileService.get_complete_profile(storage, profile_id)


def test_absent_profile_scores_zero():
    result = calculate_completion(None)
    assert result.completedSections == 0
    assert result.totalSections == 8
    assert result.completionPercentage == 0
    assert [s.completed for s in result.sections] == [False] * 8


def test_empty_profile_scores_zero(storage):
    result = calculate_completion(_complete(storage))
    assert result.completedSections == 0
    assert result.completionPercentage == 0


def test_personal_info_needs_name_and_email(storage):
    storage.profiles.update(1, {"fullName": "A"})
    assert calculate_completion(_complete(storage)).completedSections == 0

    storage.profiles.update(1, {"email": "a@b.com"})
    result = calculate_completion(_complete(storage))
    assert result.completedSections == 1
    assert result.completionPercentage == 13  # 12.5 rounds half up
    assert result.sections[0].name == "Personal Information"
    assert result.sections[0].completed is True


@pytest.mark.parametrize("completed,expected", [
    (0, 0), (1, 13), (2, 25), (3, 38), (4, 50), (5, 63), (6, 75), (7, 88), (8, 100),
])
def test_percentage_rounds_half_up(completed, expected):
    assert percentage(completed, 8) == expected


def test_percentage_non_decreasing_as_sections_fill(storage):
    steps = [
        lambda: storage.profiles.update(1, {"fullName": "A", "email": "a@b.com"}),
        lambda: storage.education.create({"profileId": 1, "institution": "MIT", "degree": "BSc"}),
        lambda: storage.skills.create({"profileId": 1, "name": "Python", "category": "Technical"}),
        lambda: storage.experience.create({"profileId": 1, "jobTitle": "Dev", "company": "Acme"}),
        lambda: storage.projects.create({"profileId": 1, "title": "Site"}),
        lambda: storage.certifications.create({"profileId": 1, "name": "AWS", "issuer": "Amazon"}),
        lambda: storage.external_links.create(
            {"profileId": 1, "platform": "GitHub", "url": "https://github.com/a"}
        ),
        lambda: storage.resume_files.create({
            "profileId": 1, "filename": "x.pdf", "originalName": "cv.pdf",
            "fileSize": 1, "mimeType": "application/pdf",
        }),
    ]
    previous = calculate_completion(_complete(storage)).completionPercentage
    for count, step in enumerate(steps, start=1):
        step()
        result = calculate_completion(_complete(storage))
        assert result.completedSections == count
        assert result.completionPercentage >= previous
        assert result.completionPercentage == percentage(count, 8)
        previous = result.completionPercentage
    assert previous == 100


def test_other_profiles_children_do_not_count(storage):
    storage.education.create({"profileId": 2, "institution": "MIT", "degree": "BSc"})
    assert calculate_completion(_complete(storage)).completedSections == 0


def test_extra_records_in_a_section_count_once(storage):
    for name in ("Python", "SQL", "Go"):
        storage.skills.create({"profileId": 1, "name": name, "category": "Technical"})
    assert calculate_completion(_complete(storage)).completedSections == 1
