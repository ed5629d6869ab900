PROTESTS_URL = "/api/protests"
