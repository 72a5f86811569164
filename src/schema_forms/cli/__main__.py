from schema_forms.cli import app

if __name__ == "__main__":
    app()
