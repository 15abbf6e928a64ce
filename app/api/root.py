from fastapi import APIRouter

router = APIRouter()

@router.get("/")
def root():
    return {
        "name": "Employee Management API",
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
        "employees": "/api/employees",
    }
