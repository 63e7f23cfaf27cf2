from oscillationLab.WavePhysics.runner import main

main()
