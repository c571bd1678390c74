from collections.abc import Iterator
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from resume_review.accounts.exceptions import (
    InvalidPasswordError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from resume_review.accounts.models import UserProfile
from resume_review.accounts.service import AccountService
from resume_review.analysis.models import AnalysisResult
from resume_review.api.app import create_app
from resume_review.config.settings import Settings
from resume_review.ingestion.exceptions import ErrorKind
from resume_review.ingestion.models import PipelineError, PipelineOutcome
from resume_review.ingestion.pipeline import build_pipeline

_PROFILE = UserProfile(username="ada", email="ada@example.com", name="Ada", age=36)


@pytest.fixture()
def settings() -> Settings:
    return Settings(analysis_provider="example")


@pytest.fixture()
def accounts() -> MagicMock:
    return MagicMock(spec=AccountService)


@pytest.fixture()
def client(settings: Settings, accounts: MagicMock, tmp_path: Path) -> Iterator[TestClient]:
    pipeline = build_pipeline(settings, staging_root=tmp_path)
    app = create_app(settings, pipeline=pipeline, account_service=accounts)
    with TestClient(app) as test_client:
        yield test_client


def _client_with_outcome(settings: Settings, outcome: PipelineOutcome) -> TestClient:
    pipeline = MagicMock()
    pipeline.run = AsyncMock(return_value=outcome)
    pipeline.aclose = AsyncMock()
    app = create_app(settings, pipeline=pipeline, account_service=MagicMock())
    return TestClient(app)


class TestRoot:
    def test_banner(self, client: TestClient) -> None:
        response = client.get("/")
        assert response.status_code == 200
        assert response.text == "Resume Review Backend is running"


class TestUploadResume:
    def test_reviews_pdf(
        self, client: TestClient, sample_pdf_bytes: bytes, tmp_path: Path
    ) -> None:
        response = client.post(
            "/upload-resume",
            files={"resume": ("cv.pdf", sample_pdf_bytes, "application/pdf")},
        )

        assert response.status_code == 200
        body = response.json()
        assert set(body) == {"response"}
        assert "*" not in body["response"]
        assert list(tmp_path.iterdir()) == []

    def test_rejects_non_pdf(self, client: TestClient) -> None:
        response = client.post(
            "/upload-resume",
            files={"resume": ("cv.txt", b"plain text", "text/plain")},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Only PDF files are allowed"}

    def test_missing_file(self, client: TestClient) -> None:
        response = client.post("/upload-resume", data={"other": "value"})

        assert response.status_code == 400
        assert response.json() == {"error": "No file uploaded"}

    def test_wrong_field_name_is_missing_file(
        self, client: TestClient, sample_pdf_bytes: bytes
    ) -> None:
        response = client.post(
            "/upload-resume",
            files={"document": ("cv.pdf", sample_pdf_bytes, "application/pdf")},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "No file uploaded"}

    def test_corrupt_pdf(self, client: TestClient, tmp_path: Path) -> None:
        response = client.post(
            "/upload-resume",
            files={"resume": ("cv.pdf", b"not really a pdf", "application/pdf")},
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to extract text from PDF"}
        assert list(tmp_path.iterdir()) == []

    @pytest.mark.parametrize(
        ("kind", "status"),
        [
            (ErrorKind.AUTH, 401),
            (ErrorKind.RATE_LIMITED, 429),
            (ErrorKind.UPSTREAM, 500),
            (ErrorKind.IO, 500),
        ],
    )
    def test_maps_error_kinds_to_status(
        self,
        settings: Settings,
        sample_pdf_bytes: bytes,
        kind: ErrorKind,
        status: int,
    ) -> None:
        outcome = PipelineOutcome.errored(PipelineError(kind=kind, message="nope"))
        with _client_with_outcome(settings, outcome) as test_client:
            response = test_client.post(
                "/upload-resume",
                files={"resume": ("cv.pdf", sample_pdf_bytes, "application/pdf")},
            )

        assert response.status_code == status
        assert response.json() == {"error": "nope"}

    def test_passes_upload_to_pipeline(self, settings: Settings, sample_pdf_bytes: bytes) -> None:
        outcome = PipelineOutcome.completed(AnalysisResult(text="fine"))
        test_client = _client_with_outcome(settings, outcome)
        with test_client:
            response = test_client.post(
                "/upload-resume",
                files={"resume": ("cv.pdf", sample_pdf_bytes, "application/pdf")},
            )
            payload = test_client.app.state.pipeline.run.call_args.args[0]

        assert response.json() == {"response": "fine"}
        assert payload.content == sample_pdf_bytes
        assert payload.media_type == "application/pdf"
        assert payload.filename == "cv.pdf"

    def test_rejects_more_than_one_file(self, settings: Settings, sample_pdf_bytes: bytes) -> None:
        outcome = PipelineOutcome.completed(AnalysisResult(text="fine"))
        test_client = _client_with_outcome(settings, outcome)
        with test_client:
            response = test_client.post(
                "/upload-resume",
                files=[
                    ("resume", ("a.pdf", sample_pdf_bytes, "application/pdf")),
                    ("resume", ("b.pdf", sample_pdf_bytes, "application/pdf")),
                ],
            )
            run = test_client.app.state.pipeline.run

        assert response.status_code == 400
        assert response.json() == {"error": "Only one file may be uploaded"}
        run.assert_not_called()

    def test_oversize_upload_is_rejected(self, tmp_path: Path) -> None:
        settings = Settings(analysis_provider="example", max_upload_bytes=16)
        pipeline = build_pipeline(settings, staging_root=tmp_path)
        app = create_app(settings, pipeline=pipeline, account_service=MagicMock())

        with TestClient(app) as test_client:
            response = test_client.post(
                "/upload-resume",
                files={"resume": ("cv.pdf", b"%" * 65536, "application/pdf")},
            )

        assert response.status_code == 400
        assert response.json() == {"error": "Uploaded file exceeds the 16 byte limit"}
        assert list(tmp_path.iterdir()) == []

    def test_oversize_upload_is_read_only_past_the_limit(self) -> None:
        settings = Settings(analysis_provider="example", max_upload_bytes=16)
        outcome = PipelineOutcome.completed(AnalysisResult(text="fine"))
        test_client = _client_with_outcome(settings, outcome)
        with test_client:
            test_client.post(
                "/upload-resume",
                files={"resume": ("cv.pdf", b"%" * 65536, "application/pdf")},
            )
            payload = test_client.app.state.pipeline.run.call_args.args[0]

        assert payload.size == 17


class TestLogin:
    def test_success(self, client: TestClient, accounts: MagicMock) -> None:
        accounts.login.return_value = _PROFILE

        response = client.post("/login", json={"username": "ada", "password": "pw"})

        assert response.status_code == 200
        assert response.json() == {
            "message": "Login successful",
            "user": {"username": "ada", "email": "ada@example.com", "name": "Ada", "age": 36},
        }
        accounts.login.assert_called_once_with("ada", "pw")

    def test_unknown_user(self, client: TestClient, accounts: MagicMock) -> None:
        accounts.login.side_effect = UserNotFoundError("ghost")

        response = client.post("/login", json={"username": "ghost", "password": "pw"})

        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}

    def test_wrong_password(self, client: TestClient, accounts: MagicMock) -> None:
        accounts.login.side_effect = InvalidPasswordError("ada")

        response = client.post("/login", json={"username": "ada", "password": "bad"})

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid password"}

    def test_unexpected_error(self, client: TestClient, accounts: MagicMock) -> None:
        accounts.login.side_effect = RuntimeError("db down")

        response = client.post("/login", json={"username": "ada", "password": "pw"})

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    def test_missing_fields(self, client: TestClient) -> None:
        response = client.post("/login", json={"username": "ada"})
        assert response.status_code == 422


class TestSignup:
    def _body(self) -> dict[str, object]:
        return {
            "username": "ada",
            "name": "Ada",
            "age": 36,
            "email": "ada@example.com",
            "password": "pw",
        }

    def test_success(self, client: TestClient, accounts: MagicMock) -> None:
        accounts.signup.return_value = _PROFILE

        response = client.post("/signup", json=self._body())

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "User created successfully"
        assert "password" not in body["user"]
        accounts.signup.assert_called_once_with(
            username="ada", email="ada@example.com", password="pw", name="Ada", age=36
        )

    def test_duplicate(self, client: TestClient, accounts: MagicMock) -> None:
        accounts.signup.side_effect = UserAlreadyExistsError("ada")

        response = client.post("/signup", json=self._body())

        assert response.status_code == 400
        assert response.json() == {"error": "User already exists"}

    def test_negative_age_rejected(self, client: TestClient) -> None:
        body = self._body() | {"age": -1}
        response = client.post("/signup", json=body)
        assert response.status_code == 422

    @pytest.mark.parametrize("field", ["name", "age"])
    def test_missing_profile_field_rejected(
        self, client: TestClient, accounts: MagicMock, field: str
    ) -> None:
        body = self._body()
        del body[field]

        response = client.post("/signup", json=body)

        assert response.status_code == 422
        accounts.signup.assert_not_called()
