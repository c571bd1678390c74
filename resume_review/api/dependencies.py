from fastapi import Request

from resume_review.accounts.service import AccountService
from resume_review.config.settings import Settings
from resume_review.ingestion.pipeline import IngestionPipeline


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_pipeline(request: Request) -> IngestionPipeline:
    return request.app.state.pipeline


def get_account_service(request: Request) -> AccountService:
    return request.app.state.account_service
