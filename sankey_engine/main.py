from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import config
from .core.utils import configure_logging
from .routers import network, transform

configure_logging(config.logging.level)

app = FastAPI(title="Transfer Flow Sankey Engine", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(transform.router)
app.include_router(network.router)


@app.get("/")
def read_root():
    return {"status": "ok", "message": "Transfer Flow Sankey Engine is running"}


@app.get("/health")
def health_check():
    return {"status": "ok", "service": "Transfer Flow Sankey Engine"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
