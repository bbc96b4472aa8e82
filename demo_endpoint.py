"""
Quick demo script for the attraction endpoints.

This script starts a local server and shows how to make requests to it.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting AI Attraction Finder Backend Demo")
    print("=" * 60)
    print()
    print("📌 API Endpoints:")
    print("   - Health Check:        GET  http://localhost:8000/health")
    print("   - Geolocation Options: GET  http://localhost:8000/geolocation/options")
    print("   - Query Attractions:   POST http://localhost:8000/attractions/query")
    print("   - Attraction Details:  POST http://localhost:8000/attractions/details")
    print("   - API Docs:                 http://localhost:8000/docs")
    print()
    print("📝 Test with curl:")
    print('   curl -X POST "http://localhost:8000/attractions/query" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"latitude": 25.033, "longitude": 121.5654, "category": "food", "distance": "1km"}\'')
    print()
    print('   curl -X POST "http://localhost:8000/attractions/details" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"name": "台北101"}\'')
    print()
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "attraction_finder.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
