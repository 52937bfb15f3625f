from sentinelguard.main import run

run()
