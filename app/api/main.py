import logging
import os
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from dotenv import load_dotenv
from app.api.routes import router as api_router
from app.services.audit_agent import ContractAuditor

load_dotenv()

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"), format="%(asctime)s - [%(levelname)s] - %(message)s")
logger = logging.getLogger("API")

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",") if o.strip()]

@asynccontextmanager
async def  lifespan(app: FastAPI):
    try:
        app.state.auditor = ContractAuditor.from_env() #one client for the whole process
        if app.state.auditor.client is None:
            logger.critical("Contract Auditor started without OpenAI credentials, audits will fail")
        else:
            logger.info("Contract Auditor Initialized")
    except Exception as e:
        app.state.auditor = None
        logger.critical(f"failed to initialize auditor: {e}")

    yield

    logger.info("Shutting down")

app= FastAPI(
        title="Smart Contract Audit API",
        description="AI assisted Solidity security audit",
        version="1.0.0",
        lifespan=lifespan
    )
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api")

@app.get("/health")
def health():
    return {"status": "ok"}

if __name__=="__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
