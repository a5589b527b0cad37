import pytest

from cardapio import db
from cardapio.models import Autorizacao
from cardapio.services import AutorizacaoService
from tests.conftest import auth_headers, make_prato


@pytest.fixture
def pratos(app, alimentos):
    return [
        make_prato('Feijoada', alimentos),
        make_prato('Galinhada', alimentos),
        make_prato('Moqueca', alimentos),
    ]


def test_bulk_assignment(client, admin, leitor, pratos):
    response = client.post(
        '/api/autorizacoes',
        json={'usuarioId': leitor.id, 'pratoIds': [pratos[0].id, pratos[2].id]},
        headers=auth_headers(admin)
    )

    assert response.status_code == 201
    assert [a['prato']['nome'] for a in response.get_json()] == ['Feijoada', 'Moqueca']

    response = client.get('/api/pratos', headers=auth_headers(leitor))
    assert [p['nome'] for p in response.get_json()] == ['Feijoada', 'Moqueca']


def test_bulk_assignment_keeps_existing_grants(client, admin, leitor, pratos):
    db.session.add(Autorizacao(usuario=leitor, prato=pratos[0]))
    db.session.commit()

    response = client.post(
        '/api/autorizacoes',
        json={'usuarioId': leitor.id, 'pratoIds': [pratos[0].id, pratos[1].id]},
        headers=auth_headers(admin)
    )

    assert response.status_code == 201
    assert Autorizacao.query.filter_by(usuario_id=leitor.id).count() == 2


@pytest.mark.parametrize('payload, status', [
    ({'usuarioId': 'x', 'pratoIds': [1]}, 400),
    ({'usuarioId': 1, 'pratoIds': []}, 400),
    ({'usuarioId': 1, 'pratoIds': [999]}, 400),
    ({'usuarioId': 999, 'pratoIds': [1]}, 404),
])
def test_bulk_assignment_validation(client, admin, pratos, payload, status):
    response = client.post('/api/autorizacoes', json=payload, headers=auth_headers(admin))
    assert response.status_code == status
    assert Autorizacao.query.count() == 0


def test_bulk_assignment_rejects_inactive_dish(client, admin, leitor, pratos):
    pratos[1].ativo = False
    db.session.commit()

    response = client.post(
        '/api/autorizacoes',
        json={'usuarioId': leitor.id, 'pratoIds': [pratos[1].id]},
        headers=auth_headers(admin)
    )
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Um ou mais pratos informados não existem'


@pytest.mark.parametrize('fixture', ['editor', 'leitor'])
def test_only_admin_manages_authorizations(client, request, pratos, fixture):
    usuario = request.getfixturevalue(fixture)
    headers = auth_headers(usuario)

    assert client.get('/api/autorizacoes', headers=headers).status_code == 403
    response = client.post(
        '/api/autorizacoes',
        json={'usuarioId': usuario.id, 'pratoIds': [pratos[0].id]},
        headers=headers
    )
    assert response.status_code == 403
    assert client.post('/api/autorizacoes/verifica-acesso', json={}, headers=headers).status_code == 403


def test_list_and_get_authorizations(client, admin, leitor, alimentos):
    prato = make_prato('Feijoada', alimentos, autorizados=[leitor])
    autorizacao = Autorizacao.query.one()

    response = client.get('/api/autorizacoes', headers=auth_headers(admin))
    body = response.get_json()
    assert len(body) == 1
    assert body[0]['usuario']['email'] == 'leitor@example.com'
    assert body[0]['prato']['id'] == prato.id

    response = client.get(f'/api/autorizacoes/{autorizacao.id}', headers=auth_headers(admin))
    assert response.status_code == 200

    response = client.get('/api/autorizacoes/999', headers=auth_headers(admin))
    assert response.status_code == 404
    assert response.get_json()['error'] == 'Autorização não encontrada'


def test_authorizations_by_user(client, admin, leitor, alimentos):
    make_prato('Feijoada', alimentos, autorizados=[leitor])

    response = client.get(f'/api/autorizacoes/usuario/{leitor.id}', headers=auth_headers(admin))
    body = response.get_json()
    assert response.status_code == 200
    assert [a['prato']['nome'] for a in body] == ['Feijoada']
    assert len(body[0]['prato']['alimentos']) == 3

    response = client.get('/api/autorizacoes/usuario/999', headers=auth_headers(admin))
    assert response.status_code == 404


def test_pratos_pelo_token(client, leitor, editor, alimentos):
    make_prato('Feijoada', alimentos, autorizados=[leitor])
    make_prato('Antigo', alimentos, autorizados=[leitor], ativo=False)
    make_prato('Galinhada', alimentos, autorizados=[editor])

    response = client.get('/api/autorizacoes/pratos-pelo-token', headers=auth_headers(leitor))

    assert response.status_code == 200
    body = response.get_json()
    assert [a['prato']['nome'] for a in body] == ['Feijoada']
    assert 'usuario' not in body[0]


def test_verifica_acesso(client, admin, leitor, alimentos):
    prato = make_prato('Feijoada', alimentos, autorizados=[leitor])
    outro = make_prato('Galinhada', alimentos)
    headers = auth_headers(admin)

    response = client.post(
        '/api/autorizacoes/verifica-acesso',
        json={'usuarioId': leitor.id, 'pratoId': prato.id},
        headers=headers
    )
    assert response.get_json() == {'acesso': True}

    response = client.post(
        '/api/autorizacoes/verifica-acesso',
        json={'usuarioId': leitor.id, 'pratoId': outro.id},
        headers=headers
    )
    assert response.get_json() == {'acesso': False}

    response = client.post(
        '/api/autorizacoes/verifica-acesso',
        json={'usuarioId': str(leitor.id), 'pratoId': prato.id},
        headers=headers
    )
    assert response.status_code == 400
    assert response.get_json()['error'] == 'usuarioId e pratoId devem ser números'


def test_verifica_admin(client, admin, leitor):
    headers = auth_headers(admin)

    assert client.get(f'/api/autorizacoes/usuario/{admin.id}/admin', headers=headers).get_json() == {'admin': True}
    assert client.get(f'/api/autorizacoes/usuario/{leitor.id}/admin', headers=headers).get_json() == {'admin': False}
    assert client.get('/api/autorizacoes/usuario/999/admin', headers=headers).status_code == 404


def test_revoke(client, admin, leitor, alimentos):
    prato = make_prato('Feijoada', alimentos, autorizados=[leitor])
    autorizacao_id = Autorizacao.query.one().id

    response = client.delete(f'/api/autorizacoes/{autorizacao_id}', headers=auth_headers(admin))
    assert response.status_code == 204

    assert client.get(f'/api/pratos/{prato.id}', headers=auth_headers(leitor)).status_code == 403
    assert client.delete(f'/api/autorizacoes/{autorizacao_id}', headers=auth_headers(admin)).status_code == 404


def test_usuario_tem_acesso_ao_prato(app, leitor, editor, alimentos):
    prato = make_prato('Feijoada', alimentos, autorizados=[leitor])

    assert AutorizacaoService.usuario_tem_acesso_ao_prato(leitor.id, prato.id) is True
    assert AutorizacaoService.usuario_tem_acesso_ao_prato(editor.id, prato.id) is False
