from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
def health(request: Request):
    controller = getattr(request.app.state, "holdings_controller", None)
    return {
        "status": "ok",
        "holdings": controller.get_state().loading_phase.value if controller else "not_initialised",
    }
