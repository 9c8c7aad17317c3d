from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

# Stand-in for google.serper.dev, mounted in tests through httpx.ASGITransport
app = FastAPI()

MOCK_API_KEY = "mock-serper-key"

RESULT_KEYS = {
    None: "organic",
    "image": "images",
    "video": "videos",
    "news": "news",
    "shopping": "shopping",
}

def make_results(search_type, count: int) -> list:
    results = []
    for i in range(1, count + 1):
        if search_type == "image":
            results.append({"title": f"Image {i}", "imageUrl": f"https://img.example.com/{i}.png", "source": "example.com", "link": f"https://example.com/{i}"})
        elif search_type == "video":
            results.append({"title": f"Video {i}", "channel": "Example Channel", "duration": f"{i}:00", "link": f"https://video.example.com/{i}"})
        elif search_type == "news":
            results.append({"title": f"News {i}", "source": "Example News", "date": f"{i} hours ago", "link": f"https://news.example.com/{i}", "snippet": f"News snippet {i}"})
        elif search_type == "shopping":
            results.append({"title": f"Product {i}", "price": f"${i}9.99", "source": "Example Store", "link": f"https://shop.example.com/{i}", "rating": "4.5"})
        else:
            results.append({"title": f"Result {i}", "link": f"https://example.com/{i}", "snippet": f"Snippet for result {i}"})
    return results

@app.get("/health")
async def health_check():
    return {"status": "healthy"}

@app.post("/search")
async def search(request: Request):
    if request.headers.get("X-API-KEY") != MOCK_API_KEY:
        return JSONResponse(status_code=403, content={"message": "Unauthorized.", "statusCode": 403})

    body = await request.json()
    search_type = body.get("type")
    if search_type not in RESULT_KEYS:
        return JSONResponse(status_code=400, content={"message": f"Unsupported type: {search_type}", "statusCode": 400})

    # Upstream returns one more result than requested so truncation notes show up
    count = body.get("num", 10) + 1
    return JSONResponse(content={
        "searchParameters": {**body, "engine": "google"},
        RESULT_KEYS[search_type]: make_results(search_type, count),
    })
