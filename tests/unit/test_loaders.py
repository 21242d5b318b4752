"""Unit tests for resume and job description loading."""

import json

import pytest

from resumate.contexts.intake import InvalidResumeStructureError, load_job_description, load_resume
from resumate.contexts.intake.loaders import resolve_source


class TestLoadResume:

    @pytest.mark.unit
    def test_load_yaml_by_path(self, fixtures_path):
        content = load_resume(fixtures_path / "jane_doe.yaml")

        assert content.personal_info.full_name == "Jane Doe"
        assert len(content.experience) == 2
        assert content.education[0].graduation_date == "2016"
        assert content.projects[0].technologies == ["Python", "Kafka"]

    @pytest.mark.unit
    def test_load_by_identifier(self, fixtures_path):
        content = load_resume("jane_doe", resumes_dir=fixtures_path)

        assert content.personal_info.email == "jane.doe@example.com"

    @pytest.mark.unit
    def test_stored_record_unwrapped(self, fixtures_path):
        content = load_resume(fixtures_path / "stored_resume.json")

        assert content.personal_info.full_name == "Sam Lee"
        assert content.certifications[0]["issuer"] == "Example Cloud"
        assert content.languages == [
            {"id": "lang-1", "language": "Spanish", "proficiency": "Professional"}
        ]

    @pytest.mark.unit
    def test_json_content_root(self, tmp_path, complete_resume):
        path = tmp_path / "jane.json"
        path.write_text(json.dumps(complete_resume))

        assert load_resume(path).to_dict() == complete_resume

    @pytest.mark.unit
    def test_list_root_rejected(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- one\n- two\n")

        with pytest.raises(InvalidResumeStructureError) as exc_info:
            load_resume(path)

        assert exc_info.value.source_path == path

    @pytest.mark.unit
    def test_interpolation_syntax_kept_literal(self, tmp_path, monkeypatch):
        monkeypatch.setenv("RESUMATE_TEST_SECRET", "hunter2")
        summary = "Built ${var.region} lookups; token ${oc.env:RESUMATE_TEST_SECRET}"
        path = tmp_path / "templated.json"
        path.write_text(json.dumps({"personalInfo": {}, "summary": summary}))

        content = load_resume(path)

        assert content.summary == summary
        assert "hunter2" not in content.summary

    @pytest.mark.unit
    def test_malformed_document_rejected(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("summary: [unclosed\n  experience: {\n")

        with pytest.raises(InvalidResumeStructureError, match="Could not parse") as exc_info:
            load_resume(path)

        assert exc_info.value.source_path == path

    @pytest.mark.unit
    def test_missing_source(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="nobody"):
            load_resume("nobody", resumes_dir=tmp_path)


class TestLoadJobDescription:

    @pytest.mark.unit
    def test_load_by_path(self, fixtures_path):
        text = load_job_description(fixtures_path / "job_description.md")

        assert text.startswith("# Data Platform Engineer")

    @pytest.mark.unit
    def test_identifier_tries_md_then_txt(self, tmp_path):
        (tmp_path / "role.txt").write_text("from txt")
        assert load_job_description("role", jobs_dir=tmp_path) == "from txt"

        (tmp_path / "role.md").write_text("from md")
        assert load_job_description("role", jobs_dir=tmp_path) == "from md"

    @pytest.mark.unit
    def test_missing_job(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_job_description("missing", jobs_dir=tmp_path)


@pytest.mark.unit
def test_resolve_source_prefers_existing_path(tmp_path):
    direct = tmp_path / "resume.yaml"
    direct.write_text("summary: hi\n")

    assert resolve_source(direct, tmp_path / "elsewhere", (".yaml",)) == direct
