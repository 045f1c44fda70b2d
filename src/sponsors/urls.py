PRINCIPAL_SPONSOR_URL = "/api/principal-sponsor"
