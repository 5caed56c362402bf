from eventboard import create_app

app = create_app()


if __name__ == '__main__':
    try:
        # Use debug mode only when FLASK_ENV=development
        app.run(host='0.0.0.0', port=app.config['PORT'], debug=app.config['DEBUG'])
    finally:
        app.extensions['database'].dispose()
