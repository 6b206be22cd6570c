"""
FastAPI application entry point.
"""
from dotenv import load_dotenv
from gateway.core.application import create_application
from gateway.core.config import get_settings

# Load environment variables
load_dotenv()

settings = get_settings()

app = create_application(settings)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
