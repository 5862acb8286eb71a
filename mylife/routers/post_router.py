# mylife/routers/post_router.py
import uuid
from fastapi import APIRouter, Depends, Response
from mylife.dependencies.services import get_post_service
from mylife.schemas.base import BaseResponse
from mylife.schemas.post_schema import (
    CreatePostRequest,
    DetailPostResponse,
    GetAllPostsResponse,
    UpdatePostRequest,
)
from mylife.services.post_service import PostService

router = APIRouter(prefix="/posts", tags=["posts"])

# the HTTP status always mirrors the envelope's statusCode

@router.get("", response_model=GetAllPostsResponse)
async def get_public_posts(response: Response, svc: PostService = Depends(get_post_service)):
    result = await svc.get_public_posts()
    response.status_code = result.status_code
    return result

@router.get("/{post_id}", response_model=DetailPostResponse)
async def get_post(post_id: uuid.UUID, response: Response, svc: PostService = Depends(get_post_service)):
    result = await svc.get_post_by_id(post_id)
    response.status_code = result.status_code
    return result

@router.post("", response_model=BaseResponse, status_code=201)
async def create_post(payload: CreatePostRequest, response: Response, svc: PostService = Depends(get_post_service)):
    result = await svc.create_post(payload)
    response.status_code = result.status_code
    return result

@router.put("/{post_id}", response_model=BaseResponse)
async def update_post(post_id: uuid.UUID, payload: UpdatePostRequest, response: Response, svc: PostService = Depends(get_post_service)):
    result = await svc.update_post(post_id, payload)
    response.status_code = result.status_code
    return result

@router.delete("/{post_id}", response_model=BaseResponse)
async def delete_post(post_id: uuid.UUID, response: Response, svc: PostService = Depends(get_post_service)):
    result = await svc.delete_post(post_id)
    response.status_code = result.status_code
    return result
