#!/usr/bin/env python3
"""
Instagram Archive-Fellow Script
Vergleicht Follower mit gefolgten Accounts aus einem Instagram-Datenexport (ZIP).
"""

import os
import io
import sys
import json
import re
import zipfile
import zlib
from enum import Enum
from dataclasses import dataclass, field
from typing import List, Dict, Set, Tuple, Optional, Any, Iterable
from datetime import datetime
from urllib.parse import urlsplit, quote

import click
from flask import Flask, Response, jsonify, request
from dotenv import load_dotenv
from werkzeug.exceptions import HTTPException

# Lade Umgebungsvariablen
load_dotenv()

FOLLOWERS_PATH = "connections/followers_and_following/followers_1.json"
FOLLOWING_PATH = "connections/followers_and_following/following.json"

USERNAME_RE = re.compile(r"^[A-Za-z0-9._]{1,30}$")

# Anzahl der Archivpfade, die in der Fehlermeldung aufgelistet werden
MAX_LISTED_PATHS = 40

# Titel, Speicher-Key für ausgeblendete Accounts und CSV-Dateiname pro Liste
LIST_SPECS = {
    'not_following_back': {
        'title': 'Folgen mir nicht zurück',
        'storage_key': 'hidden_not_following_back_v1',
        'csv_file_name': 'not_following_back.csv',
    },
    'you_dont_follow_back': {
        'title': 'Folgen mir, ich nicht zurück',
        'storage_key': 'hidden_you_dont_follow_back_v1',
        'csv_file_name': 'you_dont_follow_back.csv',
    },
    'mutuals': {
        'title': 'Gegenseitig',
        'storage_key': 'hidden_mutuals_v1',
        'csv_file_name': 'mutuals.csv',
    },
}


class ArchiveAnalysisError(Exception):
    """Basisklasse für alle Fehler bei der Archiv-Analyse"""


class ArchiveOpenError(ArchiveAnalysisError):
    """Die Datei ist kein lesbares ZIP-Archiv"""


class MissingEntryError(ArchiveAnalysisError):
    """Eine oder beide benötigten JSON-Dateien fehlen im Archiv"""

    def __init__(self, expected: List[str], available: List[str]):
        self.expected = list(expected)
        self.available = list(available)
        message = (
            "Benötigte Dateien nicht gefunden. Erwartet:\n"
            + "\n".join(f"- {path}" for path in self.expected)
            + "\n\nGefundene Pfade (Auszug):\n"
            + "\n".join(self.available[:MAX_LISTED_PATHS])
        )
        super().__init__(message)


class ArchiveParseError(ArchiveAnalysisError):
    """Inhalt einer Archivdatei ist kein gültiges UTF-8/JSON"""


class EntryKind(Enum):
    """Art eines string_list_data-Eintrags"""
    VALUE = "value"
    LINK = "link"
    EMPTY = "empty"


@dataclass(frozen=True)
class AnalysisResult:
    """Ergebnis einer Archiv-Analyse. Wird einmal erzeugt und nie verändert."""
    followers: int
    following: int
    not_following_back: Tuple[str, ...] = field(default_factory=tuple)
    you_dont_follow_back: Tuple[str, ...] = field(default_factory=tuple)
    mutuals: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def counts(self) -> Dict[str, int]:
        return {
            'followers': self.followers,
            'following': self.following,
            'not_following_back': len(self.not_following_back),
            'you_dont_follow_back': len(self.you_dont_follow_back),
            'mutuals': len(self.mutuals),
        }

    def to_dict(self) -> Dict[str, Any]:
        """JSON-serialisierbare Darstellung für Web-Oberfläche und CLI"""
        return {
            'counts': self.counts,
            'not_following_back': list(self.not_following_back),
            'you_dont_follow_back': list(self.you_dont_follow_back),
            'mutuals': list(self.mutuals),
        }


def is_valid_username(candidate: Any) -> bool:
    return isinstance(candidate, str) and USERNAME_RE.fullmatch(candidate) is not None


def username_from_href(href: Any) -> Optional[str]:
    """Extrahiert den Username aus einer Profil-URL wie https://instagram.com/_u/name"""
    if not href or not isinstance(href, str):
        return None
    try:
        parts = urlsplit(href)
    except ValueError:
        return None
    # Ohne Schema und Host ist es keine absolute Profil-URL
    if not parts.scheme or not parts.netloc:
        return None

    # Punkt-Segmente wie ein Browser auflösen
    resolved = []
    for segment in parts.path.split("/"):
        if segment == ".":
            continue
        if segment == "..":
            if resolved:
                resolved.pop()
            continue
        resolved.append(segment)

    segments = [segment for segment in resolved if segment]
    if not segments:
        return None
    if segments[0] == "_u" and len(segments) > 1:
        return segments[1]
    return segments[0]


def classify_entry(entry: Any) -> Tuple[EntryKind, Optional[str]]:
    """Bestimmt, ob ein Eintrag einen direkten Wert, nur einen Link oder nichts enthält."""
    if not isinstance(entry, dict):
        return EntryKind.EMPTY, None

    value = entry.get('value')
    if isinstance(value, str) and value:
        return EntryKind.VALUE, value

    href = entry.get('href')
    if isinstance(href, str) and href:
        return EntryKind.LINK, href

    return EntryKind.EMPTY, None


def username_from_entry(record: Any) -> Optional[str]:
    """Liefert den Username aus dem ersten string_list_data-Eintrag eines Datensatzes"""
    if not isinstance(record, dict):
        return None
    string_list_data = record.get('string_list_data')
    if not isinstance(string_list_data, list) or not string_list_data:
        return None

    kind, raw = classify_entry(string_list_data[0])
    if kind is EntryKind.VALUE:
        candidate = raw
    elif kind is EntryKind.LINK:
        candidate = username_from_href(raw)
    else:
        return None

    return candidate if is_valid_username(candidate) else None


def extract_followers_usernames(followers_json: Any) -> Set[str]:
    """Sammelt alle Follower-Usernames aus followers_1.json"""
    if followers_json is None:
        return set()
    if not isinstance(followers_json, list):
        raise ArchiveParseError(
            f"Unerwartetes Format in {FOLLOWERS_PATH}: Liste erwartet, "
            f"{type(followers_json).__name__} gefunden"
        )

    usernames = set()
    for record in followers_json:
        username = username_from_entry(record)
        if username:
            usernames.add(username)
    return usernames


def extract_following_usernames(following_json: Any) -> Set[str]:
    """Sammelt alle gefolgten Usernames aus following.json"""
    if following_json is None:
        return set()
    if not isinstance(following_json, dict):
        raise ArchiveParseError(
            f"Unerwartetes Format in {FOLLOWING_PATH}: Objekt erwartet, "
            f"{type(following_json).__name__} gefunden"
        )

    records = following_json.get('relationships_following')
    if records is None:
        return set()
    if not isinstance(records, list):
        raise ArchiveParseError(
            f"Unerwartetes Format in {FOLLOWING_PATH}: "
            "relationships_following ist keine Liste"
        )

    usernames = set()
    for record in records:
        title = record.get('title') if isinstance(record, dict) else None
        if isinstance(title, str) and is_valid_username(title.strip()):
            usernames.add(title.strip())
            continue

        username = username_from_entry(record)
        if username:
            usernames.add(username)
    return usernames


def compare_sets(followers: Set[str], following: Set[str]) -> AnalysisResult:
    """Vergleicht Follower mit Following und sortiert die Ergebnislisten."""
    # Folge ich, aber sie folgen mir nicht
    not_following_back = following - followers

    # Folgen mir, aber ich folge nicht zurück
    you_dont_follow_back = followers - following

    # Gegenseitige Follows
    mutuals = followers & following

    return AnalysisResult(
        followers=len(followers),
        following=len(following),
        not_following_back=tuple(sorted(not_following_back)),
        you_dont_follow_back=tuple(sorted(you_dont_follow_back)),
        mutuals=tuple(sorted(mutuals)),
    )


def _read_json_entry(archive: zipfile.ZipFile, path: str) -> Any:
    """Liest eine Archivdatei als UTF-8 und parst sie als JSON"""
    try:
        raw = archive.read(path)
    except (zipfile.BadZipFile, zlib.error, OSError, RuntimeError, NotImplementedError) as e:
        raise ArchiveOpenError(f"Konnte {path} nicht aus dem Archiv lesen: {e}") from e

    try:
        return json.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise ArchiveParseError(f"{path} ist kein gültiges UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise ArchiveParseError(f"{path} enthält kein gültiges JSON: {e}") from e


def analyze_archive(blob: bytes) -> AnalysisResult:
    """Analysiert die Bytes eines Instagram-Datenexports und liefert das Ergebnis."""
    try:
        archive = zipfile.ZipFile(io.BytesIO(blob))
    except (zipfile.BadZipFile, OSError, ValueError) as e:
        raise ArchiveOpenError(f"Die Datei ist kein gültiges ZIP-Archiv: {e}") from e

    with archive:
        available = archive.namelist()
        names = set(available)
        if FOLLOWERS_PATH not in names or FOLLOWING_PATH not in names:
            raise MissingEntryError([FOLLOWERS_PATH, FOLLOWING_PATH], available)

        followers_json = _read_json_entry(archive, FOLLOWERS_PATH)
        following_json = _read_json_entry(archive, FOLLOWING_PATH)

    followers = extract_followers_usernames(followers_json)
    following = extract_following_usernames(following_json)
    return compare_sets(followers, following)


def analyze_archive_file(path: str) -> AnalysisResult:
    """Liest ein Archiv von der Festplatte und analysiert es"""
    with open(path, 'rb') as f:
        return analyze_archive(f.read())


def looks_deleted(username: str) -> bool:
    """Erkennt Platzhalter-Namen gelöschter oder deaktivierter Accounts"""
    u = username.lower()
    return (
        u.startswith("deleted_")
        or u.startswith("_deleted_")
        or "instagramuser" in u
        or "instagram_user" in u
        or "deleted" in u
    )


def filter_visible(usernames: Iterable[str], hidden: Iterable[str] = (), query: str = "",
                   hide_deleted: bool = True) -> List[str]:
    """Filtert ausgeblendete, gelöschte und nicht zur Suche passende Accounts"""
    hidden = set(hidden)
    q = (query or "").strip().lower()
    return [
        u for u in usernames
        if u not in hidden
        and not (hide_deleted and looks_deleted(u))
        and (not q or q in u.lower())
    ]


def to_csv(usernames: Iterable[str]) -> str:
    """Erzeugt eine CSV-Spalte mit Header und gequoteten Usernames"""
    header = "username\n"
    body = "\n".join('"' + u.replace('"', '""') + '"' for u in usernames)
    return header + body + "\n"


def profile_url(username: str) -> str:
    return f"https://www.instagram.com/{quote(username, safe='')}/"


class HiddenStore:
    """Einfacher File-basierter Speicher für ausgeblendete Accounts pro Liste"""

    def __init__(self, store_dir: str = None):
        self.store_dir = store_dir or os.getenv('HIDDEN_STORE_DIR', '.hidden')

    def _ensure_store_dir(self):
        """Erstelle Speicher-Verzeichnis falls es nicht existiert"""
        if not os.path.exists(self.store_dir):
            os.makedirs(self.store_dir)

    def _get_path(self, key: str) -> str:
        return os.path.join(self.store_dir, f"{key}.json")

    def load(self, key: str) -> Set[str]:
        """Lade ausgeblendete Accounts, leere Menge falls nichts gespeichert ist"""
        path = self._get_path(key)
        if not os.path.exists(path):
            return set()

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError, UnicodeDecodeError):
            # Datei korrupt, wie leerer Speicher behandeln
            return set()

        if not isinstance(data, list):
            return set()
        return {u for u in data if isinstance(u, str)}

    def save(self, key: str, hidden: Set[str]):
        """Speichere ausgeblendete Accounts"""
        self._ensure_store_dir()
        with open(self._get_path(key), 'w', encoding='utf-8') as f:
            json.dump(sorted(hidden), f)

    def hide(self, key: str, username: str) -> Set[str]:
        hidden = self.load(key)
        hidden.add(username)
        self.save(key, hidden)
        return hidden

    def unhide(self, key: str, username: str) -> Set[str]:
        hidden = self.load(key)
        hidden.discard(username)
        self.save(key, hidden)
        return hidden

    def reset(self, key: str):
        self.save(key, set())

    def reset_all(self):
        """Lösche alle gespeicherten Listen"""
        for spec in LIST_SPECS.values():
            path = self._get_path(spec['storage_key'])
            if os.path.exists(path):
                os.remove(path)


app = Flask(__name__)
app.config['MAX_CONTENT_LENGTH'] = int(os.getenv('MAX_UPLOAD_MB', 200)) * 1024 * 1024

# Flask Web Interface
@app.route('/')
def index():
    """Hauptseite mit Upload- und Analyse-Interface."""
    return '''
    <!DOCTYPE html>
    <html>
    <head>
        <title>Archive-Fellow Dashboard</title>
        <style>
            body { font-family: Arial, sans-serif; margin: 20px; background: #f5f5f5; }
            .container { max-width: 1200px; margin: 0 auto; background: white; padding: 20px; border-radius: 10px; box-shadow: 0 2px 10px rgba(0,0,0,0.1); }
            h1, h2 { color: #333; }
            .stats { display: flex; gap: 20px; margin: 20px 0; }
            .stat-card { background: #007acc; color: white; padding: 15px; border-radius: 8px; text-align: center; flex: 1; }
            .tabs { display: flex; gap: 5px; margin-top: 20px; }
            .tab { background: #eee; border: none; padding: 10px 20px; border-radius: 5px 5px 0 0; cursor: pointer; }
            .tab.active { background: #007acc; color: white; }
            .user-row { display: flex; justify-content: space-between; align-items: center; border-bottom: 1px solid #eee; padding: 8px 0; }
            .btn { background: #007acc; color: white; border: none; padding: 10px 20px; border-radius: 5px; cursor: pointer; margin: 5px; }
            .btn:hover { background: #005a9e; }
            .btn-small { padding: 4px 10px; font-size: 0.85em; }
            .error { color: #dc3545; white-space: pre-wrap; }
            .toolbar { display: flex; gap: 10px; align-items: center; margin: 10px 0; }
            .hidden { display: none; }
        </style>
    </head>
    <body>
        <div class="container">
            <h1>📦 Archive-Fellow Dashboard</h1>
            <p>Instagram-Datenexport (ZIP) hochladen. Die Analyse läuft lokal, ausgeblendete Accounts werden nur in diesem Browser gespeichert.</p>

            <div class="actions">
                <input type="file" id="archive" accept=".zip">
                <button class="btn" onclick="analyze()">📊 Analyse durchführen</button>
            </div>

            <div id="error" class="error"></div>
            <div id="results" class="hidden">
                <div class="stats" id="stats"></div>
                <div class="tabs" id="tabs"></div>
                <div class="toolbar">
                    <input type="text" id="query" placeholder="Username suchen..." oninput="render()">
                    <label><input type="checkbox" id="hideDeleted" checked onchange="render()"> Gelöschte ausblenden</label>
                    <button class="btn btn-small" onclick="downloadCsv()">⬇️ CSV</button>
                    <button class="btn btn-small" onclick="resetHidden()">♻️ Ausgeblendete zurücksetzen</button>
                </div>
                <p id="showing"></p>
                <div id="list"></div>
            </div>
        </div>

        <script>
            const LISTS = ''' + json.dumps(LIST_SPECS) + ''';
            let result = null;
            let current = 'not_following_back';

            function loadHidden(key) {
                try { return new Set(JSON.parse(localStorage.getItem(key) || '[]')); }
                catch (e) { return new Set(); }
            }

            function saveHidden(key, hidden) {
                localStorage.setItem(key, JSON.stringify(Array.from(hidden)));
            }

            function looksDeleted(u) {
                u = u.toLowerCase();
                return u.startsWith('deleted_') || u.startsWith('_deleted_') ||
                    u.includes('instagramuser') || u.includes('instagram_user') || u.includes('deleted');
            }

            function visible() {
                const hidden = loadHidden(LISTS[current].storage_key);
                const q = document.getElementById('query').value.trim().toLowerCase();
                const hideDeleted = document.getElementById('hideDeleted').checked;
                return result[current]
                    .filter(u => !hidden.has(u))
                    .filter(u => hideDeleted ? !looksDeleted(u) : true)
                    .filter(u => q ? u.toLowerCase().includes(q) : true);
            }

            async function analyze() {
                const input = document.getElementById('archive');
                const error = document.getElementById('error');
                error.textContent = '';
                document.getElementById('results').classList.add('hidden');
                result = null;
                if (!input.files.length) {
                    error.textContent = 'Bitte zuerst eine ZIP-Datei auswählen.';
                    return;
                }
                const form = new FormData();
                form.append('file', input.files[0]);
                const response = await fetch('/api/analyze', { method: 'POST', body: form });
                const data = await response.json();
                if (!response.ok) {
                    error.textContent = data.error;
                    return;
                }
                result = data;
                document.getElementById('stats').innerHTML = `
                    <div class="stat-card"><h3>${data.counts.followers}</h3><p>Follower</p></div>
                    <div class="stat-card"><h3>${data.counts.following}</h3><p>Following</p></div>
                    <div class="stat-card"><h3>${data.counts.not_following_back}</h3><p>Folgen nicht zurück</p></div>
                    <div class="stat-card"><h3>${data.counts.you_dont_follow_back}</h3><p>Ich folge nicht zurück</p></div>
                    <div class="stat-card"><h3>${data.counts.mutuals}</h3><p>Gegenseitig</p></div>`;
                document.getElementById('results').classList.remove('hidden');
                render();
            }

            function render() {
                if (!result) return;
                document.getElementById('tabs').innerHTML = Object.keys(LISTS).map(name =>
                    `<button class="tab ${name === current ? 'active' : ''}" onclick="current='${name}'; render()">${LISTS[name].title} (${result.counts[name]})</button>`
                ).join('');
                const users = visible();
                document.getElementById('showing').textContent = `Zeige ${users.length} von ${result[current].length}`;
                document.getElementById('list').innerHTML = users.length === 0
                    ? '<p>Nichts anzuzeigen. Suche leeren, Filter ändern oder Ausgeblendete zurücksetzen.</p>'
                    : users.map(u => `
                        <div class="user-row">
                            <a href="https://www.instagram.com/${encodeURIComponent(u)}/" target="_blank" rel="noopener noreferrer">@${u}</a>
                            <span>
                                <button class="btn btn-small" onclick="navigator.clipboard.writeText('${u}')">📋 Kopieren</button>
                                <button class="btn btn-small" onclick="hideUser('${u}')">🙈 Ausblenden</button>
                            </span>
                        </div>`).join('');
            }

            function hideUser(u) {
                const key = LISTS[current].storage_key;
                const hidden = loadHidden(key);
                hidden.add(u);
                saveHidden(key, hidden);
                render();
            }

            function resetHidden() {
                saveHidden(LISTS[current].storage_key, new Set());
                render();
            }

            async function downloadCsv() {
                const response = await fetch('/api/export', {
                    method: 'POST',
                    headers: { 'Content-Type': 'application/json' },
                    body: JSON.stringify({ list: current, usernames: visible() })
                });
                const blob = await response.blob();
                const a = document.createElement('a');
                a.href = URL.createObjectURL(blob);
                a.download = LISTS[current].csv_file_name;
                document.body.appendChild(a);
                a.click();
                a.remove();
                URL.revokeObjectURL(a.href);
            }
        </script>
    </body>
    </html>
    '''

@app.route('/api/analyze', methods=['POST'])
def api_analyze():
    """API-Endpoint für die Analyse eines hochgeladenen Archivs."""
    try:
        upload = request.files.get('file')
        if upload is None or not upload.filename:
            return jsonify({'error': 'Keine Datei hochgeladen'}), 400

        result = analyze_archive(upload.read())
        return jsonify(result.to_dict())

    except ArchiveAnalysisError as e:
        return jsonify({'error': str(e)}), 400
    except HTTPException as e:
        # z.B. 413 bei Überschreitung von MAX_UPLOAD_MB
        return jsonify({'error': e.description}), e.code
    except Exception as e:
        return jsonify({'error': str(e)}), 500

@app.route('/api/export', methods=['POST'])
def api_export():
    """API-Endpoint für den CSV-Export einer Liste."""
    try:
        data = request.get_json(silent=True) or {}
        list_name = data.get('list')
        usernames = data.get('usernames', [])

        if list_name not in LIST_SPECS:
            return jsonify({'error': f'Unbekannte Liste: {list_name}'}), 400
        if not isinstance(usernames, list) or not all(isinstance(u, str) for u in usernames):
            return jsonify({'error': 'usernames muss eine Liste von Strings sein'}), 400

        filename = LIST_SPECS[list_name]['csv_file_name']
        return Response(
            to_csv(usernames),
            mimetype='text/csv',
            headers={'Content-Disposition': f'attachment; filename={filename}'}
        )

    except Exception as e:
        return jsonify({'error': str(e)}), 500


def _apply_hide_options(store: HiddenStore, hide: Tuple[str, ...], reset_hidden: bool):
    """Verarbeitet --reset-hidden und --hide LISTE:USERNAME"""
    if reset_hidden:
        store.reset_all()
        print("🗑️  Ausgeblendete Accounts zurückgesetzt")

    for item in hide:
        list_name, sep, username = item.partition(':')
        if not sep or list_name not in LIST_SPECS or not username:
            raise click.BadParameter(
                f"'{item}' hat nicht das Format LISTE:USERNAME "
                f"(LISTE: {', '.join(LIST_SPECS)})",
                param_hint='--hide'
            )
        store.hide(LIST_SPECS[list_name]['storage_key'], username)
        print(f"🙈 {username} in '{list_name}' ausgeblendet")


def _print_list(list_name: str, usernames: List[str], total: int, max_display: int):
    spec = LIST_SPECS[list_name]
    header = f"{spec['title'].upper()} ({len(usernames)} von {total} angezeigt)"
    print(f"\n{header}")
    print("=" * len(header))

    if not usernames:
        print("  (leer)")
        return

    limited = usernames[:max_display]
    for user in limited:
        print(f"  • {user} - {profile_url(user)}")

    if len(limited) < len(usernames):
        remaining = len(usernames) - len(limited)
        print(f"  ... und {remaining} weitere (erhöhen Sie MAX_USERS_TO_DISPLAY für vollständige Liste)")


# CLI Interface
@click.command()
@click.argument('archive', required=False, type=click.Path(exists=True, dir_okay=False))
@click.option('--web', is_flag=True, help='Startet die Web-Oberfläche')
@click.option('--port', default=5000, help='Port für die Web-Oberfläche (Standard: 5000)')
@click.option('--csv-dir', type=click.Path(file_okay=False), help='Schreibt die drei Listen als CSV in dieses Verzeichnis')
@click.option('--json', 'as_json', is_flag=True, help='Gibt das Ergebnis als JSON aus')
@click.option('--search', default='', help='Zeigt nur Usernames, die diesen Text enthalten')
@click.option('--show-deleted', is_flag=True, help='Zeigt auch gelöschte/deaktivierte Accounts')
@click.option('--hide', multiple=True, help='Blendet einen Account aus (Format: LISTE:USERNAME, mehrfach möglich)')
@click.option('--reset-hidden', is_flag=True, help='Setzt alle ausgeblendeten Accounts zurück')
def main(archive, web, port, csv_dir, as_json, search, show_deleted, hide, reset_hidden):
    """Instagram Archive-Fellow - Analysiert Follows aus einem Instagram-Datenexport."""

    if web:
        print(f"🚀 Starte Web-Oberfläche auf http://localhost:{port}")
        print("Drücken Sie Ctrl+C zum Beenden")
        app.run(debug=True, port=port, host='127.0.0.1')
        return

    store = HiddenStore()
    _apply_hide_options(store, hide, reset_hidden)

    if not archive:
        if hide or reset_hidden:
            return
        print("❌ Archiv erforderlich! Geben Sie den Pfad zur Instagram-Export-ZIP an")
        sys.exit(1)

    try:
        result = analyze_archive_file(archive)
    except (ArchiveAnalysisError, OSError) as e:
        print(f"❌ Fehler: {e}")
        sys.exit(1)

    if as_json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return

    max_display = int(os.getenv('MAX_USERS_TO_DISPLAY', 200))

    print(f"📦 Archive-Fellow für {os.path.basename(archive)}")
    print("=" * 50)

    counts = result.counts
    print("\n📈 ZUSAMMENFASSUNG")
    print("=" * 30)
    print(f"👥 Follower: {counts['followers']}")
    print(f"📤 Following: {counts['following']}")
    print(f"🤝 Gegenseitig: {counts['mutuals']}")
    print(f"➡️  Folgen mir nicht zurück: {counts['not_following_back']}")
    print(f"⬅️  Folgen mir, ich nicht zurück: {counts['you_dont_follow_back']}")

    visible_lists = {}
    for list_name, spec in LIST_SPECS.items():
        usernames = list(getattr(result, list_name))
        visible_lists[list_name] = filter_visible(
            usernames,
            hidden=store.load(spec['storage_key']),
            query=search,
            hide_deleted=not show_deleted
        )
        _print_list(list_name, visible_lists[list_name], len(usernames), max_display)

    if csv_dir:
        os.makedirs(csv_dir, exist_ok=True)
        for list_name, usernames in visible_lists.items():
            path = os.path.join(csv_dir, LIST_SPECS[list_name]['csv_file_name'])
            with open(path, 'w', encoding='utf-8', newline='') as f:
                f.write(to_csv(usernames))
            print(f"💾 {len(usernames)} Einträge gespeichert: {path}")

    if not result.not_following_back:
        print("\n🎉 Alle, denen Sie folgen, folgen Ihnen zurück!")

    print(f"\n📅 Analyse abgeschlossen: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")

if __name__ == '__main__':
    main()
