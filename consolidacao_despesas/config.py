import os
from dotenv import load_dotenv

load_dotenv()

API_BASE_URL = os.getenv('API_BASE_URL', 'https://dadosabertos.ans.gov.br/FTP/PDA/demonstracoes_contabeis/')
TIMEOUT_HTTP = int(os.getenv('TIMEOUT_HTTP', '10'))
DEBUG = os.getenv('DEBUG', 'False') == 'True'

# Anos varridos no site da ANS, do mais recente para o mais antigo
ANOS_BUSCA = [ano.strip() for ano in os.getenv('ANOS_BUSCA', '2025,2024').split(',') if ano.strip()]
LIMITE_DOWNLOADS = int(os.getenv('LIMITE_DOWNLOADS', '3'))
BAIXAR_ARQUIVOS = os.getenv('BAIXAR_ARQUIVOS', 'True') == 'True'

# Diretórios e arquivos de trabalho
DIRETORIO_DOWNLOADS = os.getenv('DIRETORIO_DOWNLOADS', 'downloads')
DIRETORIO_LOGS = os.getenv('DIRETORIO_LOGS', 'logs')
ARQUIVO_CSV_FINAL = os.getenv('ARQUIVO_CSV_FINAL', 'consolidado.csv')
ARQUIVO_ZIP_FINAL = os.getenv('ARQUIVO_ZIP_FINAL', 'consolidado_despesas.zip')

# Encoding padrão dos arquivos do governo
ENCODING_ANS = os.getenv('ENCODING_ANS', 'iso-8859-1')
