import sqlite3


class SQLiteUserRepository:
    def __init__(self, db_path: str):
        self.db_path = db_path

    def _conn(self):
        return sqlite3.connect(self.db_path)

    def _get_current_version(self, conn) -> int:
        row = conn.execute("SELECT name FROM sqlite_master WHERE type='table' AND name='schema_info'").fetchone()
        if row:
            version_row = conn.execute("SELECT version FROM schema_info").fetchone()
            if version_row:
                return version_row[0]
        # Empty database, or tables created before versioning existed.
        return 0

    def _migrate_v1(self, conn):
        """Baseline schema (v1)."""
        conn.execute("""
            CREATE TABLE IF NOT EXISTS usuarios (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                nome TEXT NOT NULL,
                email TEXT NOT NULL UNIQUE,
                senha_salt TEXT NOT NULL,
                senha_hash TEXT NOT NULL,
                cpf TEXT UNIQUE,
                endereco TEXT,
                telefone TEXT,
                criado_em TEXT NOT NULL
            )
        """)
        conn.execute("""
            CREATE TABLE IF NOT EXISTS audit_log (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                ts TEXT NOT NULL,
                actor_user_id INTEGER,
                action TEXT NOT NULL,
                target_type TEXT NOT NULL,
                target_id TEXT,
                metadata_json TEXT,
                result TEXT NOT NULL
            )
        """)

    def init_auth_db(self):
        migrations = [self._migrate_v1]

        with self._conn() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS schema_info (
                    version INTEGER NOT NULL
                )
            """)

            current_version = self._get_current_version(conn)

            has_version_row = conn.execute("SELECT COUNT(*) FROM schema_info").fetchone()[0] > 0
            if not has_version_row:
                conn.execute("INSERT INTO schema_info (version) VALUES (?)", (current_version,))

            for i in range(current_version, len(migrations)):
                target_version = i + 1
                try:
                    migrations[i](conn)
                    conn.execute("UPDATE schema_info SET version = ?", (target_version,))
                except Exception as e:
                    # Leaving the with-block on an exception rolls the whole init back.
                    raise RuntimeError(f"Database migration to v{target_version} failed: {e}") from e

            conn.commit()

    def get_user_by_email(self, email: str):
        with self._conn() as conn:
            row = conn.execute("""
                SELECT id, nome, email, senha_salt, senha_hash, criado_em
                FROM usuarios WHERE email = ?
            """, (email,)).fetchone()
            if row:
                return {
                    "id": row[0], "nome": row[1], "email": row[2],
                    "senha_salt": row[3], "senha_hash": row[4], "criado_em": row[5],
                }
            return None

    def email_exists(self, email: str) -> bool:
        with self._conn() as conn:
            return conn.execute("SELECT id FROM usuarios WHERE email = ?", (email,)).fetchone() is not None

    def cpf_exists(self, cpf: str) -> bool:
        with self._conn() as conn:
            return conn.execute("SELECT id FROM usuarios WHERE cpf = ?", (cpf,)).fetchone() is not None

    def create_user(self, nome, email, salt_hex, pw_hash, cpf, endereco, telefone, criado_em):
        """Returns (user_dict, None) on success or (None, "integrity_error") on a unique clash."""
        with self._conn() as conn:
            try:
                cur = conn.execute("""
                    INSERT INTO usuarios (nome, email, senha_salt, senha_hash, cpf, endereco, telefone, criado_em)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """, (nome, email, salt_hex, pw_hash, cpf, endereco, telefone, criado_em))
                conn.commit()
            except sqlite3.IntegrityError:
                return None, "integrity_error"
            return {
                "id": cur.lastrowid, "nome": nome, "email": email, "cpf": cpf,
                "endereco": endereco, "telefone": telefone, "criado_em": criado_em,
            }, None
