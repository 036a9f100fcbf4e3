from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from api.schemas import McpDiscoveryResponse
from api.state import ServerSession, get_session
from rpc.dispatcher import initialize_result
from rpc.models import RpcErrorCode

router = APIRouter(prefix="/mcp", tags=["mcp"])


@router.get("", response_model=McpDiscoveryResponse)
async def discover(session: ServerSession = Depends(get_session)):
    settings = session.settings
    return {
        "name": settings.server_name,
        "version": settings.server_version,
        **initialize_result(settings),
    }


@router.post("")
async def handle_rpc(request: Request, session: ServerSession = Depends(get_session)):
    response = session.rpc.handle_raw(await request.body())
    status_code = 200
    if response.is_error and response.error.code == RpcErrorCode.PARSE_ERROR:
        status_code = 400
    return JSONResponse(status_code=status_code, content=response.to_wire())
