import traceback

from flask import Flask, jsonify, request

from reading_coach.config import SENTENCE_ACCURACY_THRESHOLD
from reading_coach.scorer import check_word, is_passing, score_sentence
from reading_coach.spelling import validate_word
from reading_coach.syllables import format_syllables, normalize_word, syllabify

app = Flask(__name__)


def _json_body():
    """Parsed JSON object body, or None when the request has none."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else None


def _syllable_entry(word):
    normalized = normalize_word(word)
    syllables = syllabify(normalized)
    return {"word": normalized, "syllables": syllables, "display": format_syllables(syllables)}


# ============================================================================
# ROUTES - HEALTH
# ============================================================================
@app.route('/health', methods=['GET'])
def health():
    return jsonify({"status": "ok"})


# ============================================================================
# ROUTES - WORD PRACTICE
# ============================================================================
@app.route('/api/match', methods=['POST'])
def match_word():
    """Check a spoken transcript against a single target word."""
    data = _json_body()
    if not data or not isinstance(data.get('target'), str):
        return jsonify({"error": "No target word provided"}), 400

    spoken = data.get('spoken') or ''
    if not isinstance(spoken, str):
        return jsonify({"error": "spoken must be a string"}), 400

    verdict = check_word(spoken, data['target'])
    return jsonify({"match": verdict.is_correct, "verdict": verdict.to_dict()})


# ============================================================================
# ROUTES - SENTENCE PRACTICE
# ============================================================================
@app.route('/api/score', methods=['POST'])
def score():
    """Score a spoken transcript against a target sentence."""
    data = _json_body()
    if not data or not isinstance(data.get('target'), str):
        return jsonify({"error": "No target sentence provided"}), 400

    spoken = data.get('spoken') or ''
    strategy = data.get('strategy', 'greedy')
    if not isinstance(spoken, str):
        return jsonify({"error": "spoken must be a string"}), 400

    try:
        result = score_sentence(spoken, data['target'], strategy=strategy)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    response = result.to_dict()
    response['threshold'] = SENTENCE_ACCURACY_THRESHOLD
    response['is_correct'] = is_passing(result)
    return jsonify(response)


# ============================================================================
# ROUTES - WORD COACH
# ============================================================================
@app.route('/api/syllabify', methods=['POST'])
def syllabify_words():
    """Syllable breakdown for one word ({"word": ...}) or many ({"words": [...]})."""
    data = _json_body()
    if not data:
        return jsonify({"error": "No word provided"}), 400

    if isinstance(data.get('words'), list):
        words = [w for w in data['words'] if isinstance(w, str)]
        return jsonify({"results": [_syllable_entry(w) for w in words]})

    if not isinstance(data.get('word'), str):
        return jsonify({"error": "No word provided"}), 400
    return jsonify(_syllable_entry(data['word']))


@app.route('/api/validate-word', methods=['POST'])
def validate():
    """Spell-check a word before it is added to a practice list."""
    data = _json_body()
    if not data or not isinstance(data.get('word'), str):
        return jsonify({"error": "No word provided"}), 400

    word = normalize_word(data['word']) or data['word']
    try:
        error = validate_word(word)
    except Exception as e:
        traceback.print_exc()
        return jsonify({"error": str(e)}), 500

    return jsonify({"word": word, "valid": error is None, "error": error})


if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=5000)
