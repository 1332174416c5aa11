from flask import Flask, jsonify, request
from texpass import PasswordConfig, __version__, generate_batch

MAX_API_COUNT = 100
MAX_API_LENGTH = 1024
CLASS_FIELDS = ('lowercase', 'uppercase', 'numbers', 'special')

app = Flask(__name__)


@app.route('/')
def home():
    return jsonify({
        "message": "TexPass API is running",
        "version": __version__,
    })


@app.route('/generate', methods=['POST'])
def generate_route():
    data = request.get_json(silent=True) or {}
    try:
        length = int(data.get('length', 16))
        count = int(data.get('count', 1))
    except (TypeError, ValueError):
        return jsonify({'error': 'length and count must be integers'}), 400
    if count > MAX_API_COUNT:
        return jsonify({'error': f'count must be at most {MAX_API_COUNT}'}), 400
    if length > MAX_API_LENGTH:
        return jsonify({'error': f'length must be at most {MAX_API_LENGTH}'}), 400

    classes = {name: data.get(name, True) for name in CLASS_FIELDS}
    for name, value in classes.items():
        # "false" as a string must not enable a class
        if not isinstance(value, bool):
            return jsonify({'error': f'{name} must be a boolean'}), 400

    config = PasswordConfig(
        length=length,
        purpose=str(data.get('purpose', 'general')),
        exclude=str(data.get('exclude', '')),
        count=count,
        **classes,
    )
    passwords, fallback = generate_batch(config)

    return jsonify({
        'passwords': passwords,
        'length': config.length,
        'purpose': config.purpose,
        'fallback': fallback,
    })


if __name__ == "__main__":
    app.run(debug=True)
