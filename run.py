"""서버 실행 스크립트"""
import uvicorn

from config.settings import HOST, PORT

if __name__ == "__main__":
    uvicorn.run(
        "api.main:app",
        host=HOST,
        port=PORT,
        reload=True
    )
