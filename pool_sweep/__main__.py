from pool_sweep.main import main

main()
