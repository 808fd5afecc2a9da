from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from core.exceptions import UpstreamError
from core.schemas import DemoApiErrorResponse, DemoApiResponse
from services.demo_api_service import DemoApiService

router = APIRouter(tags=["Default"])


def get_demo_api_service(request: Request) -> DemoApiService:
    return request.app.state.demo_api_service


@router.get(
    "/api",
    response_model=DemoApiResponse,
    summary="Call a demo external API (httpbin.org)",
    description="Returns an object containing demo content",
    responses={500: {"model": DemoApiErrorResponse, "description": "External API failed."}},
)
async def call_demo_api(demo_api_service: DemoApiService = Depends(get_demo_api_service)):
    try:
        status_code = await demo_api_service.call()
    except UpstreamError as e:
        return JSONResponse(status_code=500, content={"error": e.message})
    return DemoApiResponse(message="Demo API called (httpbin.org)", data=status_code)
