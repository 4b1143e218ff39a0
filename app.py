from dotenv import load_dotenv

# Load environment variables from the .env file before settings are read
load_dotenv()

from api.main import app  # noqa: E402

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.main:app", host="0.0.0.0", port=8000)
