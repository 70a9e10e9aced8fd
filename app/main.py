from app import create_app
import uvicorn
import os
from fastapi.middleware.cors import CORSMiddleware
app = create_app()
#Formula syntax: T F identifiers ( ) ~ & | -> <->, e.g. '(p & T) -> ~q'. Only one -> or <-> per parenthesis level.

cors_origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
if __name__ == "__main__":
    #http://127.0.0.1:8000/docs
    reload_flag = os.getenv("DEBUG", "false").lower() == "true"

    uvicorn.run(
        "app.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        reload=reload_flag,
    )
