from puzzlesearch.main import app

app()
