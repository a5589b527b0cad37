import click
from cardapio import create_app, db
from cardapio.bootstrap import criar_admin
from config import DevelopmentConfig

app = create_app(DevelopmentConfig)

@app.cli.command('setup-db')
def setup_db():
    """Setup database and create tables"""
    db.create_all()
    print("Database tables created!")

@app.cli.command('criar-admin')
@click.option('--nome', default=None, help='Nome do administrador')
@click.option('--email', default=None, help='Email do administrador')
@click.option('--senha', default=None, help='Senha do administrador')
def criar_admin_command(nome, email, senha):
    """Create the superuser (idempotent)"""
    admin, criado = criar_admin(nome, email, senha)
    if criado:
        print(f"Administrador {admin.email} criado!")
    else:
        print(f"Usuário {admin.email} já existe.")

if __name__ == '__main__':
    app.run()
