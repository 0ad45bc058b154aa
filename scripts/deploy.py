from os import environ

from brownie import (
    accounts,
    network,
    MyToken
)
from dotenv import load_dotenv


''' MYTOKEN PARAMETERS '''
TOKEN_NAME = "MyToken"
TOKEN_SYMBOL = "MTK"
TOKEN_DECIMALS = 18
INITIAL_SUPPLY = 1000 * 10 ** TOKEN_DECIMALS

''' NETWORKS SERVED BY A LOCAL DEVELOPMENT CHAIN '''
LOCAL_NETWORKS = ["development", "ganache-local", "hardhat", "anvil"]

DEPLOYMENT_ENV = ".token.env"


class DeployerNotFound(ValueError):
    pass


def is_local_network(network_id):
    return network_id in LOCAL_NETWORKS or network_id.endswith("-fork")


def get_account():
    '''
    Resolves the account the token is deployed from.

    Named keystore account in DEPLOYER_ACCOUNT wins, then a raw key in
    PRIVATE_KEY. Local chains fall back to the first unlocked account.

    Output:
      [Account]:  Brownie account that signs the deployment
    '''
    load_dotenv()

    name = environ.get("DEPLOYER_ACCOUNT")
    if name:
        return accounts.load(name)

    key = environ.get("PRIVATE_KEY")
    if key:
        return accounts.add(key)

    active = network.show_active()
    if is_local_network(active):
        return accounts[0]

    raise DeployerNotFound(
        "no deployer for network '{}': set DEPLOYER_ACCOUNT or PRIVATE_KEY"
        .format(active))


def deploy_token(deployer, initial_supply=INITIAL_SUPPLY):
    '''
    The deployer deploys MyToken and receives the whole initial supply.

    Inputs:
      deployer       [Account]:  Account signing the deployment
      initial_supply [int]:      Token units minted to the deployer

    Output:
      [Contract]:  MyToken contract instance
    '''
    return deployer.deploy(MyToken, initial_supply)


def write_deployment(token, deployer, path=DEPLOYMENT_ENV):
    with open(path, "w") as f:
        f.write('TOKEN={}\n'.format(token))
        f.write('DEPLOYER={}\n'.format(deployer))
        f.write('NETWORK={}\n'.format(network.show_active()))


def main():

    deployer = get_account()
    print("Deploying contracts with account:", deployer.address)

    token = deploy_token(deployer)
    print("Token deployed to:", token.address)

    write_deployment(token, deployer)
